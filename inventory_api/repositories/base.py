# inventory_api/repositories/base.py
"""
Storage contract shared by the in-memory and SQLAlchemy record stores.

The services only ever talk to an ``InventoryRepository``; which backend sits
behind it is decided by configuration (see ``inventory_api.dependencies``).
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import ContextManager, List, Optional


@dataclass
class ProductRecord:
    id: str
    name: str
    category: str
    sku: str
    quantity: int
    price: float
    supplier: str
    notes: Optional[str] = None
    image: Optional[str] = None
    min_stock: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# Ledger entries are never changed once written
@dataclass(frozen=True)
class StockHistoryRecord:
    id: str
    product_id: str
    product_name: str
    previous_quantity: int
    new_quantity: int
    change_amount: int
    change_type: str
    timestamp: datetime
    notes: Optional[str] = None
    user_id: Optional[str] = None


@dataclass
class UserRecord:
    id: str
    name: str
    email: str
    password_hash: str
    role: str
    created_at: Optional[datetime] = None


class InventoryRepository(ABC):
    """Products, the stock-history ledger and user accounts."""

    @abstractmethod
    def transaction(self) -> ContextManager["InventoryRepository"]:
        """
        Critical section for a read-modify-write sequence.

        Either every change made inside the block becomes visible or none of
        them does, and two transactions never run interleaved.
        """

    # --- products ---

    @abstractmethod
    def list_products(self) -> List[ProductRecord]:
        """All live products, newest first."""

    @abstractmethod
    def get_product(self, product_id: str, for_update: bool = False) -> Optional[ProductRecord]:
        ...

    @abstractmethod
    def find_product_by_sku(self, sku: str, exclude_id: Optional[str] = None) -> Optional[ProductRecord]:
        """Case-insensitive SKU lookup, optionally ignoring one product id."""

    @abstractmethod
    def add_product(self, product: ProductRecord) -> None:
        """Insert at the head of the collection."""

    @abstractmethod
    def save_product(self, product: ProductRecord) -> None:
        ...

    @abstractmethod
    def delete_product(self, product_id: str) -> Optional[ProductRecord]:
        ...

    # --- ledger ---

    @abstractmethod
    def add_history(self, entry: StockHistoryRecord) -> None:
        """Append to the ledger (stored most-recent-first)."""

    @abstractmethod
    def list_history(self) -> List[StockHistoryRecord]:
        ...

    # --- users ---

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def save_user(self, user: UserRecord) -> None:
        """Insert the user, or replace the stored one with the same id."""
