# inventory_api/routes/history.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

from inventory_api.dependencies import get_history_service
from inventory_api.services.history import HistoryService
from inventory_api.utils.tokenJWT import get_current_user
import inventory_api.schemas.stock as stock_schemas

router = APIRouter(
    prefix="/api/history",
    tags=["Stock history"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=stock_schemas.StockHistoryPage)
def list_history(
    product_id: Optional[str] = Query(None, alias="productId"),
    change_type: Optional[str] = Query(None, alias="changeType", description="increase, decrease, set or all"),
    limit: Optional[int] = Query(None, ge=0),
    offset: Optional[int] = Query(None, ge=0),
    service: HistoryService = Depends(get_history_service),
):
    return service.list_history(product_id=product_id, change_type=change_type, limit=limit, offset=offset)


@router.get("/product/{product_id}", response_model=stock_schemas.ProductHistory)
def get_product_history(product_id: str, service: HistoryService = Depends(get_history_service)):
    return service.product_history(product_id)


@router.get("/stats/summary", response_model=stock_schemas.HistorySummary)
def get_history_summary(service: HistoryService = Depends(get_history_service)):
    return service.summary()
