from domain.entities import PriceRangeCount, Transaction
from domain.services import compute_bar_chart
from application.service.month_scoped import MonthScopedService


class GetBarChartService(MonthScopedService):
    endpoint = "bar_chart"

    def compute(self, transactions: list[Transaction], month: str) -> list[PriceRangeCount]:
        """Ten price buckets, zero counts included."""
        return compute_bar_chart(transactions)
