# app/schemas/transaction_schema.py
from typing import Optional, List, Union
from datetime import datetime
from pydantic import BaseModel

from domain.entities import (
    CategoryCount,
    CombinedData,
    MonthlyStatistics,
    PriceRangeCount,
    Transaction,
    TransactionPage,
)


class TransactionResponse(BaseModel):
    id: Optional[int] = None
    title: str
    price: Union[int, float]
    description: str
    category: str
    image: Optional[str] = None
    sold: bool
    dateOfSale: datetime

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(**transaction.to_dict())


class TransactionPageResponse(BaseModel):
    page: int
    per_page: int
    total: int
    transactions: List[TransactionResponse]

    @classmethod
    def from_entity(cls, page: TransactionPage) -> "TransactionPageResponse":
        return cls(
            page=page.page,
            per_page=page.per_page,
            total=page.total,
            transactions=[TransactionResponse.from_entity(t) for t in page.transactions],
        )


class StatisticsSummary(BaseModel):
    totalSaleAmount: Union[int, float]
    totalSoldItems: int
    totalNotSoldItems: int

    @classmethod
    def from_entity(cls, stats: MonthlyStatistics) -> "StatisticsSummary":
        return cls(
            totalSaleAmount=stats.total_sale_amount,
            totalSoldItems=stats.total_sold_items,
            totalNotSoldItems=stats.total_not_sold_items,
        )


class StatisticsResponse(StatisticsSummary):
    month: str

    @classmethod
    def from_entity(cls, stats: MonthlyStatistics) -> "StatisticsResponse":
        return cls(
            month=stats.month,
            totalSaleAmount=stats.total_sale_amount,
            totalSoldItems=stats.total_sold_items,
            totalNotSoldItems=stats.total_not_sold_items,
        )


class PriceRangeResponse(BaseModel):
    range: str
    count: int

    @classmethod
    def from_entity(cls, bucket: PriceRangeCount) -> "PriceRangeResponse":
        return cls(range=bucket.range, count=bucket.count)


class CategoryCountResponse(BaseModel):
    category: str
    count: int

    @classmethod
    def from_entity(cls, group: CategoryCount) -> "CategoryCountResponse":
        return cls(category=group.category, count=group.count)


class CombinedDataResponse(BaseModel):
    transactions: List[TransactionResponse]
    statistics: StatisticsSummary
    barChartData: List[PriceRangeResponse]
    pieChartData: List[CategoryCountResponse]

    @classmethod
    def from_entity(cls, data: CombinedData) -> "CombinedDataResponse":
        return cls(
            transactions=[TransactionResponse.from_entity(t) for t in data.transactions],
            statistics=StatisticsSummary.from_entity(data.statistics),
            barChartData=[PriceRangeResponse.from_entity(b) for b in data.bar_chart],
            pieChartData=[CategoryCountResponse.from_entity(c) for c in data.pie_chart],
        )


class ErrorResponse(BaseModel):
    error: str
