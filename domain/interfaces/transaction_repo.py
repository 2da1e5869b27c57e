from typing_extensions import Protocol
from typing import Optional
from domain.entities import Transaction, TransactionStatistics, BarChartEntry, PieChartEntry


class TransactionRepository(Protocol):
    async def list_transactions(
        self,
        month: Optional[int] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[Transaction]: ...
    async def get_statistics(self, month: Optional[int] = None) -> TransactionStatistics: ...
    async def get_bar_chart(self, month: Optional[int] = None) -> list[BarChartEntry]: ...
    async def get_pie_chart(self, month: Optional[int] = None) -> list[PieChartEntry]: ...
    async def replace_all(self, transactions: list[Transaction]) -> int: ...
    async def count(self) -> int: ...
