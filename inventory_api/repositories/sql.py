# inventory_api/repositories/sql.py
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from inventory_api.models.product import Product
from inventory_api.models.stock import StockHistory
from inventory_api.models.users import User
from inventory_api.repositories.base import (
    InventoryRepository,
    ProductRecord,
    StockHistoryRecord,
    UserRecord,
)

# Serialises writers inside this process; row locks cover other processes
# on databases that support SELECT ... FOR UPDATE.
_write_lock = threading.RLock()


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands timestamps back without tzinfo
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _product_record(p: Product) -> ProductRecord:
    return ProductRecord(
        id=p.id, name=p.name, category=p.category, sku=p.sku,
        quantity=p.quantity, price=p.price, supplier=p.supplier,
        notes=p.notes, image=p.image, min_stock=p.min_stock,
        created_at=_aware(p.created_at), updated_at=_aware(p.updated_at),
    )


def _history_record(h: StockHistory) -> StockHistoryRecord:
    return StockHistoryRecord(
        id=h.id, product_id=h.product_id, product_name=h.product_name,
        previous_quantity=h.previous_quantity, new_quantity=h.new_quantity,
        change_amount=h.change_amount, change_type=h.change_type,
        timestamp=_aware(h.timestamp), notes=h.notes, user_id=h.user_id,
    )


def _user_record(u: User) -> UserRecord:
    return UserRecord(
        id=u.id, name=u.name, email=u.email, password_hash=u.password_hash,
        role=u.role, created_at=_aware(u.created_at),
    )


class SqlInventoryRepository(InventoryRepository):
    """Record store on top of a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self) -> Iterator["SqlInventoryRepository"]:
        with _write_lock:
            try:
                yield self
                self.db.commit()
            except Exception:
                self.db.rollback()
                raise

    # --- products ---

    def _product_row(self, product_id: str, for_update: bool = False) -> Optional[Product]:
        query = self.db.query(Product).filter(Product.id == product_id)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def list_products(self) -> List[ProductRecord]:
        rows = self.db.query(Product).order_by(Product.seq.desc()).all()
        return [_product_record(p) for p in rows]

    def get_product(self, product_id: str, for_update: bool = False) -> Optional[ProductRecord]:
        row = self._product_row(product_id, for_update=for_update)
        return _product_record(row) if row else None

    def find_product_by_sku(self, sku: str, exclude_id: Optional[str] = None) -> Optional[ProductRecord]:
        query = self.db.query(Product).filter(func.lower(Product.sku) == sku.lower())
        if exclude_id is not None:
            query = query.filter(Product.id != exclude_id)
        row = query.first()
        return _product_record(row) if row else None

    def add_product(self, product: ProductRecord) -> None:
        self.db.add(Product(
            id=product.id, name=product.name, category=product.category, sku=product.sku,
            quantity=product.quantity, price=product.price, supplier=product.supplier,
            notes=product.notes, image=product.image, min_stock=product.min_stock,
            created_at=product.created_at, updated_at=product.updated_at,
        ))
        self.db.flush()

    def save_product(self, product: ProductRecord) -> None:
        row = self._product_row(product.id)
        if row is None:
            raise KeyError(product.id)
        for field in ("name", "category", "sku", "quantity", "price", "supplier",
                      "notes", "image", "min_stock", "updated_at"):
            setattr(row, field, getattr(product, field))
        self.db.flush()

    def delete_product(self, product_id: str) -> Optional[ProductRecord]:
        row = self._product_row(product_id, for_update=True)
        if row is None:
            return None
        record = _product_record(row)
        self.db.delete(row)
        self.db.flush()
        return record

    # --- ledger ---

    def add_history(self, entry: StockHistoryRecord) -> None:
        self.db.add(StockHistory(
            id=entry.id, product_id=entry.product_id, product_name=entry.product_name,
            previous_quantity=entry.previous_quantity, new_quantity=entry.new_quantity,
            change_amount=entry.change_amount, change_type=entry.change_type,
            timestamp=entry.timestamp, notes=entry.notes, user_id=entry.user_id,
        ))
        self.db.flush()

    def list_history(self) -> List[StockHistoryRecord]:
        rows = self.db.query(StockHistory).order_by(StockHistory.seq.desc()).all()
        return [_history_record(h) for h in rows]

    # --- users ---

    def get_user(self, user_id: str) -> Optional[UserRecord]:
        row = self.db.query(User).filter(User.id == user_id).first()
        return _user_record(row) if row else None

    def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        row = self.db.query(User).filter(User.email == email).first()
        return _user_record(row) if row else None

    def save_user(self, user: UserRecord) -> None:
        row = self.db.query(User).filter(User.id == user.id).first()
        if row is None:
            row = User(id=user.id)
            self.db.add(row)
        row.name = user.name
        row.email = user.email
        row.password_hash = user.password_hash
        row.role = user.role
        row.created_at = user.created_at
        self.db.flush()
