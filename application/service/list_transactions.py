import time
from typing import Optional

from domain.config import get_pagination_config
from domain.entities import TransactionPage
from domain.services import filter_by_search, coerce_positive_int, paginate
from application.service.base import TransactionQueryService


class ListTransactionsService(TransactionQueryService):
    endpoint = "transactions"

    async def execute(self, search: Optional[str] = "", page=None, per_page=None) -> TransactionPage:
        """
        Search and paginate the whole dataset.

        Args:
            search: Text matched against title, description and price (optional)
            page: 1-based page number; unusable values fall back to the default
            per_page: Page size; unusable values fall back to the default
        """
        defaults = get_pagination_config()
        current_page = coerce_positive_int(page, defaults.default_page)
        page_size = coerce_positive_int(per_page, defaults.default_per_page)

        log = self._bind_logger(search=search or "", page=current_page, per_page=page_size)
        start_time = time.time()
        try:
            transactions = await self.transaction_repo.get_all_transactions()
            log.info("transactions_fetched", transaction_count=len(transactions))

            matched = filter_by_search(transactions, search)
            result = TransactionPage(
                page=current_page,
                per_page=page_size,
                total=len(matched),
                transactions=paginate(matched, current_page, page_size),
            )
        except Exception as e:
            self._record("error")
            log.error("transactions_listing_failed", error=str(e), exc_info=True)
            raise

        self._record("ok", count=result.total)
        log.info(
            "transactions_listed",
            total=result.total,
            returned=len(result.transactions),
            duration_ms=round((time.time() - start_time) * 1000, 2)
        )
        return result
