from fastapi import APIRouter, Depends, Header, Query, status
from fastapi.responses import JSONResponse
from typing import Optional
import uuid

from app.deps import get_report_service, get_seed_service
from app.schemas.transaction_schema import (
    BarChartEntryResponse,
    CombinedResponse,
    ErrorResponse,
    PieChartEntryResponse,
    SeedResponse,
    StatisticsResponse,
    TransactionResponse,
)
from application.service.seed_transactions import SeedTransactionsService
from application.service.transaction_report import TransactionReportService
from domain.config import get_pagination_config
from domain.exceptions import SeedSourceError, StoreUnavailableError
from domain.services.months import parse_month

router = APIRouter(prefix="/api")

MONTH_DESCRIPTION = "Calendar month (1-12 or a month name), any year. Omit for all months."

QUERY_ERRORS = {
    400: {"model": ErrorResponse, "description": "Invalid query parameters"},
    500: {"model": ErrorResponse, "description": "Store query failed"},
}


@router.get("/seed", responses={500: {"model": ErrorResponse, "description": "Seeding failed"}})
async def seed(
    x_request_id: Optional[str] = Header(None, alias="X-Request-ID"),
    srv: SeedTransactionsService = Depends(get_seed_service),
) -> SeedResponse:
    """
    Replace the whole transaction collection with the remote seed dataset.
    """
    request_id = x_request_id or str(uuid.uuid4())
    try:
        count = await srv.execute(request_id=request_id)
    except (SeedSourceError, StoreUnavailableError) as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Failed to seed database", message=str(e)).model_dump(exclude_none=True),
        )
    return SeedResponse(message="Database seeded successfully", count=count)


@router.get("/transactions", responses=QUERY_ERRORS)
async def list_transactions(
    month: Optional[str] = Query(None, description=MONTH_DESCRIPTION),
    search: Optional[str] = Query(None, description="Matches title, description or price, case-insensitive"),
    page: int = Query(1, ge=1),
    per_page: Optional[int] = Query(None, ge=1, alias="perPage"),
    srv: TransactionReportService = Depends(get_report_service),
) -> list[TransactionResponse]:
    """
    List the transactions of a month, optionally narrowed by a search term, one page at a time.

    Rows are returned in store order; no total count is included.
    """
    transactions = await srv.list_transactions(
        month=parse_month(month),
        search=search,
        page=page,
        per_page=per_page or get_pagination_config().default_per_page,
    )
    return [TransactionResponse.from_domain(t) for t in transactions]


@router.get("/transactions/statistics", responses=QUERY_ERRORS)
async def statistics(
    month: Optional[str] = Query(None, description=MONTH_DESCRIPTION),
    srv: TransactionReportService = Depends(get_report_service),
) -> StatisticsResponse:
    """Total sale amount and sold / not sold counts for a month."""
    return StatisticsResponse.from_domain(await srv.statistics(parse_month(month)))


@router.get("/transactions/barchart", responses=QUERY_ERRORS)
async def bar_chart(
    month: Optional[str] = Query(None, description=MONTH_DESCRIPTION),
    srv: TransactionReportService = Depends(get_report_service),
) -> list[BarChartEntryResponse]:
    """Number of transactions per price range, always ten ranges in ascending order."""
    entries = await srv.bar_chart(parse_month(month))
    return [BarChartEntryResponse.from_domain(e) for e in entries]


@router.get("/transactions/piechart", responses=QUERY_ERRORS)
async def pie_chart(
    month: Optional[str] = Query(None, description=MONTH_DESCRIPTION),
    srv: TransactionReportService = Depends(get_report_service),
) -> list[PieChartEntryResponse]:
    """Number of transactions per category present in the month."""
    entries = await srv.pie_chart(parse_month(month))
    return [PieChartEntryResponse.from_domain(e) for e in entries]


@router.get("/transactions/combined", responses=QUERY_ERRORS)
async def combined(
    month: Optional[str] = Query(None, description=MONTH_DESCRIPTION),
    srv: TransactionReportService = Depends(get_report_service),
) -> CombinedResponse:
    """
    All month views in one response: every matching transaction (unpaginated),
    statistics, bar chart and pie chart.
    """
    return CombinedResponse.from_domain(await srv.combined(parse_month(month)))
