from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from domain.entities import (
    BarChartEntry,
    CombinedReport,
    PieChartEntry,
    Transaction,
    TransactionStatistics,
)


class TransactionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    title: str
    description: str
    price: float
    date_of_sale: str = Field(alias="dateOfSale")
    sold: bool
    category: str

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            title=transaction.title,
            description=transaction.description,
            price=transaction.price,
            date_of_sale=transaction.date_of_sale,
            sold=transaction.sold,
            category=transaction.category,
        )


class StatisticsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_sale_amount: float = Field(alias="totalSaleAmount")
    sold_items: int = Field(alias="soldItems")
    not_sold_items: int = Field(alias="notSoldItems")

    @classmethod
    def from_domain(cls, statistics: TransactionStatistics) -> "StatisticsResponse":
        return cls(
            total_sale_amount=statistics.total_sale_amount,
            sold_items=statistics.sold_items,
            not_sold_items=statistics.not_sold_items,
        )


class BarChartEntryResponse(BaseModel):
    range: str
    count: int

    @classmethod
    def from_domain(cls, entry: BarChartEntry) -> "BarChartEntryResponse":
        return cls(range=entry.range, count=entry.count)


class PieChartEntryResponse(BaseModel):
    category: str
    count: int

    @classmethod
    def from_domain(cls, entry: PieChartEntry) -> "PieChartEntryResponse":
        return cls(category=entry.category, count=entry.count)


class CombinedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transactions: List[TransactionResponse]
    statistics: StatisticsResponse
    bar_chart: List[BarChartEntryResponse] = Field(alias="barChart")
    pie_chart: List[PieChartEntryResponse] = Field(alias="pieChart")

    @classmethod
    def from_domain(cls, report: CombinedReport) -> "CombinedResponse":
        return cls(
            transactions=[TransactionResponse.from_domain(t) for t in report.transactions],
            statistics=StatisticsResponse.from_domain(report.statistics),
            bar_chart=[BarChartEntryResponse.from_domain(e) for e in report.bar_chart],
            pie_chart=[PieChartEntryResponse.from_domain(e) for e in report.pie_chart],
        )


class SeedResponse(BaseModel):
    message: str
    count: int


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
    details: Optional[list[dict]] = None
