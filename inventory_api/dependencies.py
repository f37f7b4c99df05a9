# inventory_api/dependencies.py
from functools import lru_cache

from fastapi import Depends

from inventory_api.config import settings
from inventory_api.database import SessionLocal
from inventory_api.repositories.base import InventoryRepository
from inventory_api.repositories.memory import MemoryInventoryRepository
from inventory_api.repositories.sql import SqlInventoryRepository
from inventory_api.seed import seed_repository
from inventory_api.services.history import HistoryService
from inventory_api.services.products import ProductService
from inventory_api.services.users import UserService


@lru_cache
def get_memory_repository() -> MemoryInventoryRepository:
    """One shared in-memory store per process."""
    repository = MemoryInventoryRepository()
    if settings.SEED_DATA:
        seed_repository(repository)
    return repository


def get_repository():
    if settings.STORAGE_BACKEND == "sql":
        db = SessionLocal()
        try:
            yield SqlInventoryRepository(db)
        finally:
            db.close()
    else:
        yield get_memory_repository()


def get_product_service(repository: InventoryRepository = Depends(get_repository)) -> ProductService:
    return ProductService(repository)


def get_history_service(repository: InventoryRepository = Depends(get_repository)) -> HistoryService:
    return HistoryService(repository)


def get_user_service(repository: InventoryRepository = Depends(get_repository)) -> UserService:
    return UserService(repository)
