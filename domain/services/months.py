from typing import Optional

from domain.exceptions import InvalidMonthError

MONTH_NUMBERS = {
    "January": "01",
    "February": "02",
    "March": "03",
    "April": "04",
    "May": "05",
    "June": "06",
    "July": "07",
    "August": "08",
    "September": "09",
    "October": "10",
    "November": "11",
    "December": "12",
}


def get_month_number(month_name: Optional[str]) -> Optional[str]:
    """Map a full month name ('March') to its two-digit code ('03'), or None."""
    if not month_name:
        return None
    return MONTH_NUMBERS.get(month_name)


def require_month_number(month_name: Optional[str]) -> str:
    """Like get_month_number, but raises InvalidMonthError for unknown names."""
    month_number = get_month_number(month_name)
    if month_number is None:
        raise InvalidMonthError(month_name)
    return month_number
