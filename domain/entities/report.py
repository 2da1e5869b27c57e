from dataclasses import dataclass, field

from .transaction import Transaction


@dataclass
class TransactionStatistics:
    total_sale_amount: float = 0.0
    sold_items: int = 0
    not_sold_items: int = 0


@dataclass
class BarChartEntry:
    range: str
    count: int


@dataclass
class PieChartEntry:
    category: str
    count: int


@dataclass
class CombinedReport:
    transactions: list[Transaction] = field(default_factory=list)
    statistics: TransactionStatistics = field(default_factory=TransactionStatistics)
    bar_chart: list[BarChartEntry] = field(default_factory=list)
    pie_chart: list[PieChartEntry] = field(default_factory=list)
