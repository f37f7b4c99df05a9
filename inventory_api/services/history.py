# inventory_api/services/history.py
import logging
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from inventory_api.errors import NotFoundError
from inventory_api.repositories.base import InventoryRepository, StockHistoryRecord
from inventory_api.services.products import utcnow

logger = logging.getLogger(__name__)

RECENT_WINDOW = timedelta(days=7)
MOST_ACTIVE_LIMIT = 5


def newest_first(entries: List[StockHistoryRecord]) -> List[StockHistoryRecord]:
    # Explicit sort: ledger insertion order is not guaranteed to be chronological
    return sorted(entries, key=lambda h: h.timestamp, reverse=True)


class HistoryService:
    def __init__(self, repository: InventoryRepository, clock: Callable[[], datetime] = utcnow):
        self.repository = repository
        self.clock = clock

    def list_history(
        self,
        product_id: Optional[str] = None,
        change_type: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> dict:
        history = self.repository.list_history()

        if product_id:
            history = [h for h in history if h.product_id == product_id]
        if change_type and change_type != "all":
            history = [h for h in history if h.change_type == change_type]

        history = newest_first(history)

        total = len(history)
        start = offset or 0
        end = start + limit if limit is not None else total
        return {
            "data": history[start:end],
            "total": total,
            "offset": start,
            "limit": limit if limit is not None else total,
        }

    def product_history(self, product_id: str) -> dict:
        # Only live products are looked up; history of a deleted product is
        # still in the ledger but not reachable from here.
        product = self.repository.get_product(product_id)
        if product is None:
            logger.warning(f"History requested for unknown product {product_id}")
            raise NotFoundError("Product not found")

        history = [h for h in self.repository.list_history() if h.product_id == product_id]
        return {
            "product": {"id": product.id, "name": product.name, "sku": product.sku},
            "history": newest_first(history),
        }

    def summary(self) -> dict:
        history = self.repository.list_history()
        names = {p.id: p.name for p in self.repository.list_products()}

        cutoff = self.clock() - RECENT_WINDOW

        counts = {}
        for h in history:
            counts[h.product_id] = counts.get(h.product_id, 0) + 1

        # sorted() is stable, so ties keep the order they were first seen in
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        most_active = [
            {
                "product_id": product_id,
                "product_name": names.get(product_id, "Unknown"),
                "change_count": count,
            }
            for product_id, count in ranked[:MOST_ACTIVE_LIMIT]
        ]

        return {
            "total_changes": len(history),
            "increases": sum(1 for h in history if h.change_type == "increase"),
            "decreases": sum(1 for h in history if h.change_type == "decrease"),
            "recent_changes": sum(1 for h in history if h.timestamp >= cutoff),
            "most_active_products": most_active,
        }
