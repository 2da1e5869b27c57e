# import
from .transaction import Transaction
from .report import TransactionStatistics, BarChartEntry, PieChartEntry, CombinedReport

__all__ = ["Transaction", "TransactionStatistics", "BarChartEntry", "PieChartEntry", "CombinedReport"]
