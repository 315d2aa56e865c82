from domain.entities import MonthlyStatistics, Transaction
from domain.services import compute_statistics
from application.service.month_scoped import MonthScopedService


class GetStatisticsService(MonthScopedService):
    endpoint = "statistics"

    def compute(self, transactions: list[Transaction], month: str) -> MonthlyStatistics:
        return compute_statistics(transactions, month=month)
