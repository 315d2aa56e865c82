from .dataset_client import DatasetClient
from .transaction_repo_api import TransactionRepoAPI

__all__ = ["DatasetClient", "TransactionRepoAPI"]
