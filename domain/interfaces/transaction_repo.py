from typing_extensions import Protocol
from domain.entities import Transaction


class TransactionRepository(Protocol):
    async def get_all_transactions(self) -> list[Transaction]: ...
