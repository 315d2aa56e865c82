from domain.entities import CategoryCount, Transaction
from domain.services import compute_pie_chart
from application.service.month_scoped import MonthScopedService


class GetPieChartService(MonthScopedService):
    endpoint = "pie_chart"

    def compute(self, transactions: list[Transaction], month: str) -> list[CategoryCount]:
        return compute_pie_chart(transactions)
