from .months import MONTH_NUMBERS, get_month_number, require_month_number
from .filters import filter_by_search, filter_by_month, coerce_positive_int, paginate
from .aggregations import PRICE_RANGES, compute_statistics, compute_bar_chart, compute_pie_chart, price_range_label

__all__ = [
    "MONTH_NUMBERS",
    "get_month_number",
    "require_month_number",
    "filter_by_search",
    "filter_by_month",
    "coerce_positive_int",
    "paginate",
    "PRICE_RANGES",
    "compute_statistics",
    "compute_bar_chart",
    "compute_pie_chart",
    "price_range_label",
]
