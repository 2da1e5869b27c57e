from .transaction_repo import TransactionRepository
from .seed_source import SeedSource
from .metrics_port import MetricsPort
from .logging_port import LoggingPort, BoundLogger

__all__ = ["TransactionRepository", "SeedSource", "MetricsPort", "LoggingPort", "BoundLogger"]
