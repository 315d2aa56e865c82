# import
from .transaction import Transaction
from .summaries import MonthlyStatistics, PriceRangeCount, CategoryCount, TransactionPage, CombinedData

__all__ = ["Transaction", "MonthlyStatistics", "PriceRangeCount", "CategoryCount", "TransactionPage", "CombinedData"]
