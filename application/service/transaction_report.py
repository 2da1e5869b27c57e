import asyncio
import time
from typing import Awaitable, Callable, Optional, TypeVar

from application.service.noop_logger import NoOpLogger
from domain.entities import (
    BarChartEntry,
    CombinedReport,
    PieChartEntry,
    Transaction,
    TransactionStatistics,
)
from domain.exceptions import InvalidQueryError, StoreUnavailableError
from domain.interfaces import TransactionRepository, MetricsPort, LoggingPort

T = TypeVar("T")

# SQL OFFSET is a signed 64-bit integer in every supported store
MAX_OFFSET = 2 ** 63 - 1


class TransactionReportService:
    """
    Read-only views over the transaction store.

    Every method re-queries the store; nothing is cached between calls.
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        metrics_port: Optional[MetricsPort] = None,
        logging_port: Optional[LoggingPort] = None,
        max_per_page: Optional[int] = None,
    ):
        """
        Args:
            transaction_repo: Store to query (required)
            metrics_port: Metrics port for latency and failure metrics (optional)
            logging_port: Logging port for structured logging (optional)
            max_per_page: Upper bound applied to per_page in list_transactions (optional)
        """
        self.transaction_repo = transaction_repo
        self.metrics_port = metrics_port
        self.logging_port = logging_port
        self.max_per_page = max_per_page

    async def list_transactions(
        self,
        month: Optional[int] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = 10,
    ) -> list[Transaction]:
        """
        Get one page of the records matching month AND search.

        Args:
            month: 1-12, or None for every month
            search: free-text term matched against title, description and price
            page: 1-based page number
            per_page: page size, capped at max_per_page when that is set

        Raises:
            InvalidQueryError: if the page starts beyond the largest offset the store accepts
        """
        if self.max_per_page is not None:
            per_page = min(per_page, self.max_per_page)
        offset = (page - 1) * per_page
        if offset > MAX_OFFSET or per_page > MAX_OFFSET:
            raise InvalidQueryError(f"page {page} is out of range for perPage {per_page}")
        return await self._run(
            "list",
            month,
            lambda: self.transaction_repo.list_transactions(
                month=month, search=search, offset=offset, limit=per_page
            ),
            search=search,
            page=page,
            per_page=per_page,
        )

    async def statistics(self, month: Optional[int] = None) -> TransactionStatistics:
        return await self._run("statistics", month, lambda: self.transaction_repo.get_statistics(month))

    async def bar_chart(self, month: Optional[int] = None) -> list[BarChartEntry]:
        return await self._run("barchart", month, lambda: self.transaction_repo.get_bar_chart(month))

    async def pie_chart(self, month: Optional[int] = None) -> list[PieChartEntry]:
        return await self._run("piechart", month, lambda: self.transaction_repo.get_pie_chart(month))

    async def combined(self, month: Optional[int] = None) -> CombinedReport:
        """
        Build all four month views concurrently.

        Uses the same repository calls as the individual reports. If any of
        them fails the whole report fails; no partial result is returned.
        """
        async def gather() -> CombinedReport:
            transactions, statistics, bar_chart, pie_chart = await asyncio.gather(
                self.transaction_repo.list_transactions(month=month),
                self.transaction_repo.get_statistics(month),
                self.transaction_repo.get_bar_chart(month),
                self.transaction_repo.get_pie_chart(month),
            )
            return CombinedReport(
                transactions=transactions,
                statistics=statistics,
                bar_chart=bar_chart,
                pie_chart=pie_chart,
            )

        return await self._run("combined", month, gather)

    async def _run(
        self,
        report: str,
        month: Optional[int],
        query: Callable[[], Awaitable[T]],
        **context,
    ) -> T:
        log = self.logging_port.bind(report=report, month=month) if self.logging_port else NoOpLogger()
        log.debug("report_started", **context)
        start_time = time.time()
        try:
            result = await query()
        except StoreUnavailableError as e:
            if self.metrics_port:
                self.metrics_port.increment_store_failure(operation=e.operation)
            log.error(
                "report_failed",
                operation=e.operation,
                duration_ms=round((time.time() - start_time) * 1000, 2),
                error=str(e),
                exc_info=True
            )
            raise

        elapsed = time.time() - start_time
        if self.metrics_port:
            self.metrics_port.observe_report_latency(report=report, seconds=elapsed)
        log.info("report_completed", duration_ms=round(elapsed * 1000, 2), **context)
        return result
