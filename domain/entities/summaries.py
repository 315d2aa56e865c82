from dataclasses import dataclass, field
from typing import Union

from .transaction import Transaction


@dataclass
class MonthlyStatistics:
    total_sale_amount: Union[int, float]
    total_sold_items: int
    total_not_sold_items: int
    month: str = ""


@dataclass
class PriceRangeCount:
    range: str
    count: int


@dataclass
class CategoryCount:
    category: str
    count: int


@dataclass
class TransactionPage:
    page: int
    per_page: int
    total: int
    transactions: list[Transaction] = field(default_factory=list)


@dataclass
class CombinedData:
    transactions: list[Transaction]
    statistics: MonthlyStatistics
    bar_chart: list[PriceRangeCount]
    pie_chart: list[CategoryCount]
