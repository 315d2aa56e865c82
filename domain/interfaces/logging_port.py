from typing_extensions import Protocol
from typing import Any


class BoundLogger(Protocol):
    """Logger carrying request context (endpoint, month, search...)."""

    def debug(self, event: str, **kwargs: Any) -> None:
        """Log a debug event with extra context fields."""
        ...

    def info(self, event: str, **kwargs: Any) -> None:
        """
        Log an info event.

        Args:
            event: snake_case event name, e.g. "transactions_fetched"
            **kwargs: Additional context fields
        """
        ...

    def warning(self, event: str, **kwargs: Any) -> None:
        """Log a warning event with extra context fields."""
        ...

    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None:
        """
        Log an error event.

        Args:
            event: snake_case event name
            exc_info: Whether to attach the active exception traceback
            **kwargs: Additional context fields
        """
        ...


class LoggingPort(Protocol):
    """Protocol for structured logging used by the application services."""

    def bind(self, **kwargs: Any) -> BoundLogger:
        """
        Create a bound logger with context.

        Args:
            **kwargs: Context fields to bind to all log messages

        Returns:
            A bound logger with the specified context
        """
        ...
