"""
Transaction Repository implementation backed by the remote dataset.

This adapter implements the TransactionRepository protocol from domain/interfaces
by downloading the dataset through DatasetClient on every call.
"""
from typing import Any
from datetime import datetime, timezone

from domain.entities import Transaction
from domain.exceptions import DatasetFetchError
from domain.interfaces import TransactionRepository
from infrastructure.clients.dataset_client import DatasetClient

REQUIRED_FIELDS = ("title", "description", "price", "dateOfSale", "sold", "category")


class TransactionRepoAPI(TransactionRepository):
    """
    Repository implementation that reads transactions from the dataset URL.
    """
    
    def __init__(self, dataset_client: DatasetClient):
        self.dataset_client = dataset_client
    
    async def get_all_transactions(self) -> list[Transaction]:
        """
        Fetch every transaction and convert them to domain entities.
            
        Returns:
            List of Transaction domain entities, in dataset order
            
        Raises:
            DatasetFetchError: If the fetch fails or a record is malformed
        """
        raw_transactions = await self.dataset_client.fetch_transactions()
        return [self.map_to_domain_entity(raw_txn) for raw_txn in raw_transactions]
    
    @staticmethod
    def map_to_domain_entity(raw_txn: dict[str, Any]) -> Transaction:
        """
        Map a raw dataset record to a Transaction entity.
        
        Args:
            raw_txn: Raw record, e.g. {"id": 1, "title": ..., "dateOfSale": "2021-11-27T20:29:54+05:30", ...}
            
        Returns:
            Transaction domain entity
        """
        if not isinstance(raw_txn, dict):
            raise DatasetFetchError(f"Malformed record: expected an object, got {type(raw_txn).__name__}")
        missing = [name for name in REQUIRED_FIELDS if name not in raw_txn]
        if missing:
            raise DatasetFetchError(f"Malformed record {raw_txn.get('id')}: missing {', '.join(missing)}")
        
        price = raw_txn["price"]
        if isinstance(price, bool):
            raise DatasetFetchError(f"Malformed record {raw_txn.get('id')}: price {price!r}")
        if not isinstance(price, (int, float)):
            try:
                price = float(price)
            except (TypeError, ValueError) as e:
                raise DatasetFetchError(f"Malformed record {raw_txn.get('id')}: price {price!r}") from e
        
        return Transaction(
            id=raw_txn.get("id"),
            title=str(raw_txn["title"]),
            description=str(raw_txn["description"]),
            price=price,
            date_of_sale=TransactionRepoAPI._parse_date(raw_txn["dateOfSale"], raw_txn.get("id")),
            sold=bool(raw_txn["sold"]),
            category=str(raw_txn["category"]),
            image=raw_txn.get("image"),
        )
    
    @staticmethod
    def _parse_date(value: Any, record_id: Any) -> datetime:
        """Parse ISO 8601 text (with or without 'Z') or epoch milliseconds (read as UTC)."""
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError as e:
                raise DatasetFetchError(f"Malformed record {record_id}: dateOfSale {value!r}") from e
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        raise DatasetFetchError(f"Malformed record {record_id}: dateOfSale {value!r}")
