# inventory_api/schemas/stock.py
from datetime import datetime
from typing import List, Literal, Optional

from inventory_api.schemas.product import CamelModel

# "set" is only used for the initial stock of a new product
ChangeType = Literal["increase", "decrease", "set"]


class StockHistoryOut(CamelModel):
    id: str
    product_id: str
    product_name: str
    previous_quantity: int
    new_quantity: int
    change_amount: int
    change_type: ChangeType
    timestamp: datetime
    notes: Optional[str] = None
    user_id: Optional[str] = None


# Paginated ledger listing
class StockHistoryPage(CamelModel):
    data: List[StockHistoryOut]
    total: int
    offset: int
    limit: int


class ProductSummary(CamelModel):
    id: str
    name: str
    sku: str


class ProductHistory(CamelModel):
    product: ProductSummary
    history: List[StockHistoryOut]


class ActiveProduct(CamelModel):
    product_id: str
    product_name: str
    change_count: int


class HistorySummary(CamelModel):
    total_changes: int
    increases: int
    decreases: int
    recent_changes: int
    most_active_products: List[ActiveProduct]
