# inventory_api/services/stock_status.py
"""
Stock-level classification.

Two policies exist and are kept apart on purpose:

* ``stock_status`` compares a product against its own ``minStock`` threshold.
  Product responses, the dashboard figures and alerts use it.
* ``listing_stock_band`` uses fixed global bands (5 / 15) and only drives the
  ``stockStatus`` filter of the product listing.

The two can disagree (e.g. quantity 12 with minStock 10 is "sufficient" per
product but "low" in the listing band). That mismatch is a product-owner
question and must not be resolved here.
"""
from typing import Literal, Optional

StockStatus = Literal["critical", "low", "sufficient"]

STOCK_STATUSES = ("critical", "low", "sufficient")

DEFAULT_MIN_STOCK = 10

# Fixed bands used by the product listing filter
LISTING_CRITICAL_MAX = 5
LISTING_LOW_MAX = 15


def stock_status(quantity: int, min_stock: Optional[int] = DEFAULT_MIN_STOCK) -> StockStatus:
    if min_stock is None:
        min_stock = DEFAULT_MIN_STOCK
    if quantity <= 0:
        return "critical"
    if quantity <= min_stock:
        return "low"
    return "sufficient"


def listing_stock_band(quantity: int) -> StockStatus:
    if quantity <= LISTING_CRITICAL_MAX:
        return "critical"
    if quantity <= LISTING_LOW_MAX:
        return "low"
    return "sufficient"
