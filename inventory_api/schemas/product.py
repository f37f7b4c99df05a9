# inventory_api/schemas/product.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from inventory_api.services.stock_status import StockStatus


# camelCase on the wire, snake_case in Python
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# Schema for creating a new product
class ProductCreate(CamelModel):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    sku: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0)
    price: float = Field(..., ge=0)
    supplier: str = Field(..., min_length=1)
    notes: Optional[str] = None
    image_url: Optional[str] = None
    min_stock: Optional[int] = Field(None, ge=0)


# Schema for partial product updates
class ProductUpdate(CamelModel):
    """Every field optional; only the fields sent are applied."""
    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    sku: Optional[str] = Field(None, min_length=1)
    quantity: Optional[int] = Field(None, ge=0)
    price: Optional[float] = Field(None, ge=0)
    supplier: Optional[str] = Field(None, min_length=1)
    notes: Optional[str] = None
    image_url: Optional[str] = None
    min_stock: Optional[int] = Field(None, ge=0)
    # Stored on the ledger entry when the quantity changes
    history_note: Optional[str] = None


# Schema for setting the stock level directly
class StockAdjustment(CamelModel):
    quantity: int = Field(..., ge=0)
    reason: Optional[str] = None


# Full product representation including derived fields
class ProductOut(CamelModel):
    id: str
    name: str
    category: str
    sku: str
    quantity: int
    price: float
    supplier: str
    notes: Optional[str] = None
    image: Optional[str] = None
    image_url: Optional[str] = None
    min_stock: int
    stock_status: StockStatus
    created_at: datetime
    updated_at: datetime


class ProductDetail(CamelModel):
    product: ProductOut


class ProductMessage(CamelModel):
    message: str
    product: ProductOut


class ProductList(CamelModel):
    products: List[ProductOut]


# Dashboard figures over all live products
class InventoryStats(CamelModel):
    total: int
    critical: int
    low: int
    sufficient: int
    total_value: float
