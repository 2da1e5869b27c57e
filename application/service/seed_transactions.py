import time
from typing import Optional

from application.service.noop_logger import NoOpLogger
from domain.exceptions import SeedSourceError, StoreUnavailableError
from domain.interfaces import TransactionRepository, SeedSource, MetricsPort, LoggingPort


class SeedTransactionsService:
    def __init__(
        self,
        seed_source: SeedSource,
        transaction_repo: TransactionRepository,
        metrics_port: Optional[MetricsPort] = None,
        logging_port: Optional[LoggingPort] = None
    ):
        """
        Initialize the seeding service.
        
        Args:
            seed_source: Source of the seed dataset (required)
            transaction_repo: Store whose collection gets replaced (required)
            metrics_port: Metrics port for emitting metrics (optional)
            logging_port: Logging port for structured logging (optional)
        """
        self.seed_source = seed_source
        self.transaction_repo = transaction_repo
        self.metrics_port = metrics_port
        self.logging_port = logging_port

    async def execute(self, request_id: Optional[str] = None) -> int:
        """
        Replace the whole transaction collection with the seed dataset.

        Returns:
            Number of records in the collection after seeding

        Raises:
            SeedSourceError: the dataset could not be fetched or parsed; the store is untouched
            StoreUnavailableError: the replacement failed
        """
        start_time = time.time()
        log = self.logging_port.bind(request_id=request_id or "unknown", step="seed") if self.logging_port else NoOpLogger()
        log.info("seed_started")

        try:
            fetch_start = time.time()
            transactions = await self.seed_source.fetch_transactions()
            log.info(
                "seed_fetched",
                duration_ms=round((time.time() - fetch_start) * 1000, 2),
                record_count=len(transactions)
            )

            inserted = await self.transaction_repo.replace_all(transactions)
        except SeedSourceError as e:
            self._emit("source_error")
            log.error("seed_failed", reason="source_error", error=str(e), exc_info=True)
            raise
        except StoreUnavailableError as e:
            self._emit("store_error")
            if self.metrics_port:
                self.metrics_port.increment_store_failure(operation=e.operation)
            log.error("seed_failed", reason="store_error", operation=e.operation, error=str(e), exc_info=True)
            raise

        self._emit("success")
        log.info(
            "seed_completed",
            duration_ms=round((time.time() - start_time) * 1000, 2),
            inserted=inserted
        )
        return inserted

    def _emit(self, outcome: str) -> None:
        if self.metrics_port:
            self.metrics_port.increment_seed_total(outcome=outcome)
