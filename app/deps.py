"""
FastAPI dependency providers.

The store handle and the seed client are built once in the application
lifespan (app/main.py) and kept on app.state; routes receive them through
these functions, and tests replace them with app.dependency_overrides.
"""
from fastapi import Depends, Request

from application.service.seed_transactions import SeedTransactionsService
from application.service.transaction_report import TransactionReportService
from domain.config import get_pagination_config
from domain.interfaces import SeedSource, TransactionRepository
from infrastructure.logging.logging_adapter import LoggingAdapter
from infrastructure.metrics.metrics_adapter import MetricsAdapter


def get_transaction_repo(request: Request) -> TransactionRepository:
    return request.app.state.transaction_repo


def get_seed_source(request: Request) -> SeedSource:
    return request.app.state.seed_source


def get_report_service(
    transaction_repo: TransactionRepository = Depends(get_transaction_repo),
) -> TransactionReportService:
    return TransactionReportService(
        transaction_repo=transaction_repo,
        metrics_port=MetricsAdapter(),
        logging_port=LoggingAdapter(),
        max_per_page=get_pagination_config().max_per_page,
    )


def get_seed_service(
    seed_source: SeedSource = Depends(get_seed_source),
    transaction_repo: TransactionRepository = Depends(get_transaction_repo),
) -> SeedTransactionsService:
    return SeedTransactionsService(
        seed_source=seed_source,
        transaction_repo=transaction_repo,
        metrics_port=MetricsAdapter(),
        logging_port=LoggingAdapter(),
    )
