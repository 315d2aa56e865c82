from domain.config import get_pagination_config
from domain.entities import CombinedData, Transaction
from domain.services import (
    coerce_positive_int,
    paginate,
    compute_statistics,
    compute_bar_chart,
    compute_pie_chart,
)
from application.service.month_scoped import MonthScopedService


class GetCombinedDataService(MonthScopedService):
    endpoint = "combined_data"

    def compute(self, transactions: list[Transaction], month: str, page=None, per_page=None) -> CombinedData:
        """
        Page of the month's transactions plus statistics, bar and pie data.

        page/per_page follow the same coercion as the listing endpoint.
        """
        defaults = get_pagination_config()
        current_page = coerce_positive_int(page, defaults.default_page)
        page_size = coerce_positive_int(per_page, defaults.default_per_page)
        return CombinedData(
            transactions=paginate(transactions, current_page, page_size),
            statistics=compute_statistics(transactions, month=month),
            bar_chart=compute_bar_chart(transactions),
            pie_chart=compute_pie_chart(transactions),
        )
