# infrastructure/metrics/metrics.py
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

transaction_requests_total = Counter(
    "transaction_requests_total",
    "Requests served by the transaction insight endpoints",
    ["endpoint", "outcome"]  # ok|invalid_month|error
)

transactions_returned = Histogram(
    "transactions_returned",
    "Transactions left after filtering, per request",
    ["endpoint"],
    buckets=[0, 10, 25, 50, 100, 250, 500, 1000]
)

dataset_fetch_failures_total = Counter(
    "dataset_fetch_failures_total",
    "Remote dataset fetch failures"
)

dataset_fetch_latency_seconds = Histogram(
    "dataset_fetch_latency_seconds",
    "Remote dataset fetch latency in seconds",
    buckets=[0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10]
)


def metrics_endpoint():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
