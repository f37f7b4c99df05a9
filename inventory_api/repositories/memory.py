# inventory_api/repositories/memory.py
import threading
from contextlib import contextmanager
from dataclasses import replace
from typing import Iterator, List, Optional

from inventory_api.repositories.base import (
    InventoryRepository,
    ProductRecord,
    StockHistoryRecord,
    UserRecord,
)


class MemoryInventoryRepository(InventoryRepository):
    """
    Process-local record store backed by plain lists.

    Records go in and come out as copies, so a caller mutating a returned
    product cannot change what is stored.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._products: List[ProductRecord] = []
        self._history: List[StockHistoryRecord] = []
        self._users: List[UserRecord] = []

    @contextmanager
    def transaction(self) -> Iterator["MemoryInventoryRepository"]:
        with self._lock:
            snapshot = (list(self._products), list(self._history), list(self._users))
            try:
                yield self
            except Exception:
                self._products, self._history, self._users = snapshot
                raise

    # --- products ---

    def list_products(self) -> List[ProductRecord]:
        with self._lock:
            return [replace(p) for p in self._products]

    def get_product(self, product_id: str, for_update: bool = False) -> Optional[ProductRecord]:
        with self._lock:
            for p in self._products:
                if p.id == product_id:
                    return replace(p)
        return None

    def find_product_by_sku(self, sku: str, exclude_id: Optional[str] = None) -> Optional[ProductRecord]:
        wanted = sku.lower()
        with self._lock:
            for p in self._products:
                if p.sku.lower() == wanted and p.id != exclude_id:
                    return replace(p)
        return None

    def add_product(self, product: ProductRecord) -> None:
        with self._lock:
            self._products.insert(0, replace(product))

    def save_product(self, product: ProductRecord) -> None:
        with self._lock:
            for i, p in enumerate(self._products):
                if p.id == product.id:
                    self._products[i] = replace(product)
                    return
        raise KeyError(product.id)

    def delete_product(self, product_id: str) -> Optional[ProductRecord]:
        with self._lock:
            for i, p in enumerate(self._products):
                if p.id == product_id:
                    return self._products.pop(i)
        return None

    # --- ledger ---

    def add_history(self, entry: StockHistoryRecord) -> None:
        with self._lock:
            self._history.insert(0, entry)

    def list_history(self) -> List[StockHistoryRecord]:
        with self._lock:
            return list(self._history)

    # --- users ---

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        with self._lock:
            for u in self._users:
                if u.id == user_id:
                    return replace(u)
        return None

    def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        with self._lock:
            for u in self._users:
                if u.email == email:
                    return replace(u)
        return None

    def save_user(self, user: UserRecord) -> None:
        with self._lock:
            for i, u in enumerate(self._users):
                if u.id == user.id:
                    self._users[i] = replace(user)
                    return
            self._users.append(replace(user))
