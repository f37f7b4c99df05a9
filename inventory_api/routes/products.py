# inventory_api/routes/products.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from inventory_api.dependencies import get_product_service
from inventory_api.repositories.base import ProductRecord, UserRecord
from inventory_api.services.products import ProductService
from inventory_api.services.stock_status import DEFAULT_MIN_STOCK, stock_status
from inventory_api.utils.tokenJWT import get_current_user
import inventory_api.schemas.product as product_schemas

# Every product endpoint requires a valid bearer token
router = APIRouter(
    prefix="/api/products",
    tags=["Products"],
    dependencies=[Depends(get_current_user)],
)


# ---- HELPERS ----
def _product_out(product: ProductRecord) -> product_schemas.ProductOut:
    min_stock = product.min_stock if product.min_stock is not None else DEFAULT_MIN_STOCK
    return product_schemas.ProductOut(
        id=product.id,
        name=product.name,
        category=product.category,
        sku=product.sku,
        quantity=product.quantity,
        price=product.price,
        supplier=product.supplier,
        notes=product.notes,
        image=product.image,
        image_url=product.image or None,
        min_stock=min_stock,
        stock_status=stock_status(product.quantity, min_stock),
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


# =========================
# PRODUCT LIST
# =========================
@router.get("", response_model=product_schemas.ProductList)
def list_products(
    category: Optional[str] = Query(None),
    stock_status_filter: Optional[str] = Query(None, alias="stockStatus"),
    search: Optional[str] = Query(None),
    service: ProductService = Depends(get_product_service),
):
    products = service.list_products(category=category, stock_status=stock_status_filter, search=search)
    return {"products": [_product_out(p) for p in products]}


# =========================
# HELPER ENDPOINTS
# =========================
@router.get("/meta/categories", response_model=List[str])
def get_categories(service: ProductService = Depends(get_product_service)):
    return service.categories()


@router.get("/meta/stats", response_model=product_schemas.InventoryStats)
def get_inventory_stats(service: ProductService = Depends(get_product_service)):
    return service.inventory_stats()


# =========================
# SINGLE PRODUCT
# =========================
@router.get("/{product_id}", response_model=product_schemas.ProductDetail)
def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    return {"product": _product_out(service.get_product(product_id))}


@router.post("", response_model=product_schemas.ProductMessage, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: product_schemas.ProductCreate,
    service: ProductService = Depends(get_product_service),
    current_user: UserRecord = Depends(get_current_user),
):
    product = service.create_product(payload, user_id=current_user.id)
    return {"message": "Product created successfully", "product": _product_out(product)}


@router.put("/{product_id}", response_model=product_schemas.ProductMessage)
def update_product(
    product_id: str,
    payload: product_schemas.ProductUpdate,
    service: ProductService = Depends(get_product_service),
    current_user: UserRecord = Depends(get_current_user),
):
    product = service.update_product(product_id, payload, user_id=current_user.id)
    return {"message": "Product updated successfully", "product": _product_out(product)}


@router.patch("/{product_id}/stock", response_model=product_schemas.ProductMessage)
def adjust_stock(
    product_id: str,
    payload: product_schemas.StockAdjustment,
    service: ProductService = Depends(get_product_service),
    current_user: UserRecord = Depends(get_current_user),
):
    product = service.adjust_stock(product_id, payload.quantity, payload.reason, user_id=current_user.id)
    return {"message": "Stock updated successfully", "product": _product_out(product)}


# =========================
# DELETE
# =========================
@router.delete("/{product_id}", response_model=product_schemas.ProductMessage)
def delete_product(product_id: str, service: ProductService = Depends(get_product_service)):
    product = service.delete_product(product_id)
    return {"message": "Product deleted successfully", "product": _product_out(product)}
