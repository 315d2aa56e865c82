import time
from typing import Any, Optional

from domain.entities import Transaction
from domain.exceptions import InvalidMonthError
from domain.services import filter_by_month, require_month_number
from application.service.base import TransactionQueryService


class MonthScopedService(TransactionQueryService):
    """
    Base for use cases restricted to one calendar month.

    The month name is validated before the dataset is fetched, so an invalid
    month never costs a remote call.
    """

    async def execute(self, month: Optional[str], **kwargs: Any):
        log = self._bind_logger(month=month or "")
        try:
            month_number = require_month_number(month)
        except InvalidMonthError:
            self._record("invalid_month")
            log.warning("invalid_month_rejected")
            raise

        start_time = time.time()
        try:
            transactions = await self.transaction_repo.get_all_transactions()
            in_month = filter_by_month(transactions, month_number)
            log.info(
                "transactions_filtered_by_month",
                transaction_count=len(transactions),
                month_count=len(in_month)
            )
            result = self.compute(in_month, month, **kwargs)
        except Exception as e:
            self._record("error")
            log.error(f"{self.endpoint}_failed", error=str(e), exc_info=True)
            raise

        self._record("ok", count=len(in_month))
        log.info(
            f"{self.endpoint}_computed",
            duration_ms=round((time.time() - start_time) * 1000, 2)
        )
        return result

    def compute(self, transactions: list[Transaction], month: str, **kwargs: Any):
        raise NotImplementedError
