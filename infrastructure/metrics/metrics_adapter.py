"""
Metrics adapter that implements the MetricsPort protocol with Prometheus metrics.
"""
from infrastructure.metrics.metrics import (
    transaction_requests_total,
    transactions_returned,
)


class MetricsAdapter:
    """
    Adapter that implements MetricsPort; values are exposed on /metrics.
    """

    def increment_request_total(self, endpoint: str, outcome: str) -> None:
        transaction_requests_total.labels(endpoint=endpoint, outcome=outcome).inc()

    def observe_transactions_returned(self, endpoint: str, count: int) -> None:
        transactions_returned.labels(endpoint=endpoint).observe(count)
