from typing import Optional

from domain.entities import Transaction


def filter_by_search(transactions: list[Transaction], search: Optional[str]) -> list[Transaction]:
    """
    Keep transactions whose title, description or price contains the search text.

    Title and description are compared case-insensitively. An empty search
    keeps everything.
    """
    if not search:
        return list(transactions)
    needle = search.lower()
    return [
        t for t in transactions
        if needle in t.title.lower()
        or needle in t.description.lower()
        or search in t.price_text
    ]


def filter_by_month(transactions: list[Transaction], month_number: str) -> list[Transaction]:
    """Keep transactions sold in the given two-digit month, whatever the year."""
    return [t for t in transactions if t.sale_month == month_number]


def coerce_positive_int(value, default: int) -> int:
    """Parse a query value as a positive int, falling back to the default."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def paginate(transactions: list[Transaction], page: int, per_page: int) -> list[Transaction]:
    start = (page - 1) * per_page
    end = start + per_page
    return transactions[start:end]
