"""
Domain exceptions raised by the transaction insight use cases.
"""

INVALID_MONTH_MESSAGE = "Invalid month name. Use full month name."


class DatasetFetchError(Exception):
    """Raised when the remote transaction dataset cannot be retrieved or parsed."""


class InvalidMonthError(ValueError):
    """Raised when a month-scoped query does not carry a full English month name."""

    def __init__(self, month: str | None = None):
        self.month = month
        super().__init__(INVALID_MONTH_MESSAGE)
