import json
import os

import pytest

from domain.entities import Transaction
from infrastructure.clients.transaction_repo_api import TransactionRepoAPI

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


def load_raw_transactions(filename: str = "transactions_sample.json") -> list[dict]:
    with open(os.path.join(DATA_DIR, filename), "r") as f:
        return json.load(f)


@pytest.fixture
def raw_transactions() -> list[dict]:
    return load_raw_transactions()


@pytest.fixture
def transactions(raw_transactions) -> list[Transaction]:
    """Sample dataset: four March records (50/150/950 sold, 300 unsold) plus July and November ones."""
    return [TransactionRepoAPI.map_to_domain_entity(t) for t in raw_transactions]


class FakeTransactionRepo:
    """In-memory TransactionRepository that counts fetches."""

    def __init__(self, transactions=None, error: Exception | None = None):
        self.transactions = transactions or []
        self.error = error
        self.calls = 0

    async def get_all_transactions(self) -> list[Transaction]:
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.transactions)


@pytest.fixture
def fake_repo(transactions) -> FakeTransactionRepo:
    return FakeTransactionRepo(transactions)


@pytest.fixture
def make_repo():
    """Factory for repos with custom contents or a failure to raise."""
    return FakeTransactionRepo
