import math

from domain.entities import CategoryCount, MonthlyStatistics, PriceRangeCount, Transaction

# (label, inclusive upper bound); each bucket starts right after the previous bound
PRICE_RANGES: list[tuple[str, float]] = [
    ("0-100", 100),
    ("101-200", 200),
    ("201-300", 300),
    ("301-400", 400),
    ("401-500", 500),
    ("501-600", 600),
    ("601-700", 700),
    ("701-800", 800),
    ("801-900", 900),
    ("901-above", math.inf),
]


def compute_statistics(transactions: list[Transaction], month: str = "") -> MonthlyStatistics:
    total_sale_amount = 0
    total_sold_items = 0
    for t in transactions:
        if t.sold:
            total_sale_amount += t.price
            total_sold_items += 1
    return MonthlyStatistics(
        month=month,
        total_sale_amount=round(total_sale_amount, 2),
        total_sold_items=total_sold_items,
        total_not_sold_items=len(transactions) - total_sold_items,
    )


def price_range_label(price: float) -> str:
    """Label of the bucket a price falls in; prices below zero land in the first one."""
    for label, upper in PRICE_RANGES:
        if price <= upper:
            return label
    return PRICE_RANGES[-1][0]


def compute_bar_chart(transactions: list[Transaction]) -> list[PriceRangeCount]:
    counts = {label: 0 for label, _ in PRICE_RANGES}
    for t in transactions:
        counts[price_range_label(t.price)] += 1
    return [PriceRangeCount(range=label, count=counts[label]) for label, _ in PRICE_RANGES]


def compute_pie_chart(transactions: list[Transaction]) -> list[CategoryCount]:
    # dicts keep insertion order, so categories come out in first-seen order
    counts: dict[str, int] = {}
    for t in transactions:
        counts[t.category] = counts.get(t.category, 0) + 1
    return [CategoryCount(category=category, count=count) for category, count in counts.items()]
