from typing import Any, Optional

from domain.interfaces import TransactionRepository, MetricsPort, LoggingPort, BoundLogger


class NoOpLogger:
    """Used when no logging port is injected (mostly in unit tests)."""
    def debug(self, event: str, **kwargs: Any): pass
    def info(self, event: str, **kwargs: Any): pass
    def warning(self, event: str, **kwargs: Any): pass
    def error(self, event: str, exc_info: bool = False, **kwargs: Any): pass


class TransactionQueryService:
    """
    Shared wiring for the read-only transaction use cases.

    Subclasses set `endpoint` and implement `execute()`.
    """
    endpoint = "transactions"

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        metrics_port: Optional[MetricsPort] = None,
        logging_port: Optional[LoggingPort] = None
    ):
        """
        Args:
            transaction_repo: Repository for fetching transactions (required)
            metrics_port: Metrics port for emitting metrics (optional)
            logging_port: Logging port for structured logging (optional)
        """
        self.transaction_repo = transaction_repo
        self.metrics_port = metrics_port
        self.logging_port = logging_port

    def _bind_logger(self, **context: Any) -> BoundLogger:
        if self.logging_port:
            return self.logging_port.bind(endpoint=self.endpoint, **context)
        return NoOpLogger()

    def _record(self, outcome: str, count: Optional[int] = None) -> None:
        if not self.metrics_port:
            return
        self.metrics_port.increment_request_total(endpoint=self.endpoint, outcome=outcome)
        if count is not None:
            self.metrics_port.observe_transactions_returned(endpoint=self.endpoint, count=count)
