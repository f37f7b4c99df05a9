# inventory_api/services/products.py
"""
Product mutations and the stock-history entries they produce.

Every mutation runs inside ``repository.transaction()``: the product write and
the ledger append become visible together or not at all, and concurrent
updates of the same product cannot interleave their read-modify-write of the
quantity.
"""
import logging
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, List, Optional

from inventory_api.errors import ConflictError, NotFoundError, ValidationError
from inventory_api.repositories.base import InventoryRepository, ProductRecord, StockHistoryRecord
from inventory_api.schemas.product import ProductCreate, ProductUpdate
from inventory_api.services.stock_status import (
    STOCK_STATUSES,
    listing_stock_band,
    stock_status,
)

logger = logging.getLogger(__name__)

PRODUCT_CATEGORIES = [
    "Electronics",
    "Clothing",
    "Food & Beverages",
    "Office Supplies",
    "Furniture",
    "Tools & Hardware",
    "Health & Beauty",
    "Sports & Outdoors",
    "Other",
]

REQUIRED_FIELDS = ("name", "category", "sku", "supplier")

INITIAL_STOCK_NOTE = "Initial stock"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_id() -> str:
    return str(uuid.uuid4())


class ProductService:
    def __init__(self, repository: InventoryRepository, clock: Callable[[], datetime] = utcnow):
        self.repository = repository
        self.clock = clock

    # ---- queries ----

    def list_products(
        self,
        category: Optional[str] = None,
        stock_status: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[ProductRecord]:
        products = self.repository.list_products()

        if category and category != "all":
            products = [p for p in products if p.category == category]

        # Listing uses the fixed bands, unknown values filter nothing
        if stock_status in STOCK_STATUSES:
            products = [p for p in products if listing_stock_band(p.quantity) == stock_status]

        if search:
            needle = search.lower()
            products = [
                p for p in products
                if needle in p.name.lower() or needle in p.sku.lower()
            ]
        return products

    def get_product(self, product_id: str) -> ProductRecord:
        product = self.repository.get_product(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product

    def categories(self) -> List[str]:
        return list(PRODUCT_CATEGORIES)

    def inventory_stats(self) -> dict:
        products = self.repository.list_products()
        counts = {status: 0 for status in STOCK_STATUSES}
        for p in products:
            counts[stock_status(p.quantity, p.min_stock)] += 1
        return {
            "total": len(products),
            "critical": counts["critical"],
            "low": counts["low"],
            "sufficient": counts["sufficient"],
            "total_value": round(sum(p.price * p.quantity for p in products), 2),
        }

    # ---- mutations ----

    def create_product(self, data: ProductCreate, user_id: str) -> ProductRecord:
        missing = [f for f in REQUIRED_FIELDS if not (getattr(data, f) or "").strip()]
        if missing:
            raise ValidationError("Required fields: name, category, sku, quantity, price, supplier")

        with self.repository.transaction():
            if self.repository.find_product_by_sku(data.sku):
                logger.warning(f"Rejected product create, SKU '{data.sku}' already exists")
                raise ConflictError("SKU already exists")

            now = self.clock()
            product = ProductRecord(
                id=generate_id(),
                name=data.name,
                category=data.category,
                sku=data.sku,
                quantity=int(data.quantity),
                price=float(data.price),
                supplier=data.supplier,
                notes=data.notes or None,
                image=data.image_url or None,
                min_stock=data.min_stock,
                created_at=now,
                updated_at=now,
            )
            self.repository.add_product(product)
            self.repository.add_history(StockHistoryRecord(
                id=generate_id(),
                product_id=product.id,
                product_name=product.name,
                previous_quantity=0,
                new_quantity=product.quantity,
                change_amount=product.quantity,
                change_type="set",
                timestamp=now,
                notes=INITIAL_STOCK_NOTE,
                user_id=user_id,
            ))

        logger.info(f"Product '{product.name}' (ID: {product.id}) created with quantity {product.quantity}.")
        return product

    def update_product(self, product_id: str, data: ProductUpdate, user_id: str) -> ProductRecord:
        sent = data.model_fields_set

        with self.repository.transaction():
            existing = self.repository.get_product(product_id, for_update=True)
            if existing is None:
                logger.warning(f"Product with ID: {product_id} not found for update.")
                raise NotFoundError("Product not found")

            if data.sku and data.sku != existing.sku:
                if self.repository.find_product_by_sku(data.sku, exclude_id=product_id):
                    logger.warning(f"Rejected update of {product_id}, SKU '{data.sku}' already exists")
                    raise ConflictError("SKU already exists")

            old_quantity = existing.quantity
            new_quantity = int(data.quantity) if data.quantity is not None else old_quantity

            updated = replace(
                existing,
                name=data.name or existing.name,
                category=data.category or existing.category,
                sku=data.sku or existing.sku,
                quantity=new_quantity,
                price=float(data.price) if data.price is not None else existing.price,
                supplier=data.supplier or existing.supplier,
                # notes and image may be cleared by sending null explicitly
                notes=data.notes if "notes" in sent else existing.notes,
                image=data.image_url if "image_url" in sent else existing.image,
                min_stock=data.min_stock if data.min_stock is not None else existing.min_stock,
                updated_at=self.clock(),
            )
            self.repository.save_product(updated)

            if new_quantity != old_quantity:
                self.repository.add_history(StockHistoryRecord(
                    id=generate_id(),
                    product_id=updated.id,
                    product_name=updated.name,
                    previous_quantity=old_quantity,
                    new_quantity=new_quantity,
                    change_amount=abs(new_quantity - old_quantity),
                    change_type="increase" if new_quantity > old_quantity else "decrease",
                    timestamp=updated.updated_at,
                    notes=data.history_note or None,
                    user_id=user_id,
                ))

        logger.info(f"Product '{updated.name}' (ID: {product_id}) updated successfully.")
        return updated

    def adjust_stock(self, product_id: str, quantity: int, reason: Optional[str], user_id: str) -> ProductRecord:
        return self.update_product(
            product_id,
            ProductUpdate(quantity=quantity, history_note=reason),
            user_id,
        )

    def delete_product(self, product_id: str) -> ProductRecord:
        # Ledger entries of the product are left untouched
        with self.repository.transaction():
            deleted = self.repository.delete_product(product_id)
            if deleted is None:
                logger.warning(f"Product with ID: {product_id} not found for deletion.")
                raise NotFoundError("Product not found")
        logger.info(f"Product '{deleted.name}' (ID: {product_id}) deleted successfully.")
        return deleted
