from typing import AsyncIterator

from domain.config import get_dataset_config
from domain.interfaces import TransactionRepository, MetricsPort, LoggingPort
from infrastructure.clients import DatasetClient, TransactionRepoAPI
from infrastructure.logging.logging_adapter import LoggingAdapter
from infrastructure.metrics.metrics_adapter import MetricsAdapter


async def get_transaction_repo() -> AsyncIterator[TransactionRepository]:
    """One dataset client per request, closed once the response is built."""
    config = get_dataset_config()
    async with DatasetClient(
        url=config.url,
        connect_timeout=config.connect_timeout,
        read_timeout=config.read_timeout,
    ) as dataset_client:
        yield TransactionRepoAPI(dataset_client)


def get_metrics_port() -> MetricsPort:
    return MetricsAdapter()


def get_logging_port() -> LoggingPort:
    return LoggingAdapter()
