from typing_extensions import Protocol


class MetricsPort(Protocol):
    """Protocol for metrics operations."""
    
    def increment_request_total(self, endpoint: str, outcome: str) -> None:
        """
        Increment the transaction_requests_total counter.
        
        Args:
            endpoint: Endpoint name (e.g., "statistics", "bar_chart")
            outcome: One of "ok", "invalid_month", or "error"
        """
        ...
    
    def observe_transactions_returned(self, endpoint: str, count: int) -> None:
        """
        Record how many transactions a use case worked on.
        
        Args:
            endpoint: Endpoint name
            count: Number of transactions after filtering
        """
        ...
