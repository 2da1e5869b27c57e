from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import case, delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from domain.entities import Transaction, TransactionStatistics, BarChartEntry, PieChartEntry
from domain.exceptions import StoreUnavailableError
from domain.interfaces import TransactionRepository
from domain.services.price_buckets import PRICE_BUCKETS
from infrastructure.db.filters import month_filter, price_bucket_index, transaction_filter
from infrastructure.db.models import TransactionModel


class TransactionRepoSqlalchemy(TransactionRepository):
    """
    SQLAlchemy implementation of TransactionRepository.

    Each call opens its own session, so independent calls may run
    concurrently against the same repository instance.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self.session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailableError(
                f"Transaction store failed during {operation}: {e}", operation=operation
            ) from e

    async def list_transactions(
        self,
        month: Optional[int] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """
        Get the records matching month AND search.

        No ORDER BY is applied: rows come back in the store's natural order,
        which is insertion order on SQLite and usually on PostgreSQL too, but
        is not guaranteed by either.
        """
        stmt = select(TransactionModel).where(transaction_filter(month, search))
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        async with self._session("list") as session:
            result = await session.execute(stmt)
            return [model.to_domain() for model in result.scalars().all()]

    async def get_statistics(self, month: Optional[int] = None) -> TransactionStatistics:
        sold = func.coalesce(func.sum(case((TransactionModel.sold.is_(True), 1), else_=0)), 0)
        stmt = select(
            func.coalesce(func.sum(TransactionModel.price), 0),
            func.count(TransactionModel.id),
            sold,
        ).where(month_filter(month))
        async with self._session("statistics") as session:
            result = await session.execute(stmt)
            total_amount, total_count, sold_count = result.one()
        return TransactionStatistics(
            total_sale_amount=round(float(total_amount), 2),
            sold_items=int(sold_count),
            not_sold_items=int(total_count) - int(sold_count),
        )

    async def get_bar_chart(self, month: Optional[int] = None) -> list[BarChartEntry]:
        """Count records per price bucket; buckets without records are reported as 0."""
        # grouping on a subquery column keeps the CASE (and its bound params) out of GROUP BY
        bucketed = (
            select(price_bucket_index().label("bucket"))
            .where(month_filter(month))
            .subquery()
        )
        stmt = select(bucketed.c.bucket, func.count()).group_by(bucketed.c.bucket)
        async with self._session("barchart") as session:
            result = await session.execute(stmt)
            counts = {int(bucket): int(count) for bucket, count in result.all()}
        return [
            BarChartEntry(range=bucket.label, count=counts.get(bucket.index, 0))
            for bucket in PRICE_BUCKETS
        ]

    async def get_pie_chart(self, month: Optional[int] = None) -> list[PieChartEntry]:
        stmt = (
            select(TransactionModel.category, func.count())
            .where(month_filter(month))
            .group_by(TransactionModel.category)
            .order_by(TransactionModel.category)
        )
        async with self._session("piechart") as session:
            result = await session.execute(stmt)
            return [PieChartEntry(category=category, count=int(count)) for category, count in result.all()]

    async def replace_all(self, transactions: list[Transaction]) -> int:
        """
        Delete every record and insert `transactions` in a single store transaction.

        If the insert fails the delete is rolled back and the previous
        collection stays in place.
        """
        async with self._session("replace_all") as session:
            async with session.begin():
                await session.execute(delete(TransactionModel))
                session.add_all([TransactionModel.from_domain(t) for t in transactions])
        return len(transactions)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(TransactionModel)
        async with self._session("count") as session:
            result = await session.execute(stmt)
            return int(result.scalar_one())
