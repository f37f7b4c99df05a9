# tests/test_sql_repository.py
"""
The same service scenarios against the SQLAlchemy-backed repository, on an
in-memory SQLite database.
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from conftest import make_product
from inventory_api.database import Base
from inventory_api.errors import ConflictError, NotFoundError
from inventory_api.repositories.sql import SqlInventoryRepository
from inventory_api.schemas.product import ProductUpdate
from inventory_api.seed import ADMIN_EMAIL, PRODUCTS, seed_repository
from inventory_api.services.history import HistoryService
from inventory_api.services.products import ProductService
import inventory_api.models.product  # noqa: F401
import inventory_api.models.stock  # noqa: F401
import inventory_api.models.users  # noqa: F401

USER_ID = "u-1"


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def sql_repository(db):
    return SqlInventoryRepository(db)


@pytest.fixture
def products(sql_repository, clock):
    return ProductService(sql_repository, clock=clock)


def test_create_and_read_back(products, sql_repository):
    created = products.create_product(make_product(quantity=45, notes="boxed"), user_id=USER_ID)

    stored = sql_repository.get_product(created.id)
    assert stored == created
    assert stored.created_at.tzinfo is not None

    (entry,) = sql_repository.list_history()
    assert (entry.change_type, entry.previous_quantity, entry.new_quantity) == ("set", 0, 45)
    assert entry.notes == "Initial stock"
    assert entry.timestamp == created.created_at


def test_products_listed_newest_first(products, sql_repository):
    first = products.create_product(make_product(sku="A-1"), user_id=USER_ID)
    second = products.create_product(make_product(sku="A-2"), user_id=USER_ID)
    third = products.create_product(make_product(sku="A-3"), user_id=USER_ID)

    assert [p.id for p in sql_repository.list_products()] == [third.id, second.id, first.id]


def test_sku_check_is_case_insensitive(products, sql_repository):
    products.create_product(make_product(sku="EL-KB-001"), user_id=USER_ID)

    with pytest.raises(ConflictError):
        products.create_product(make_product(sku="el-KB-001"), user_id=USER_ID)

    assert len(sql_repository.list_products()) == 1
    assert len(sql_repository.list_history()) == 1


def test_update_writes_ledger_entry(products, sql_repository):
    product = products.create_product(make_product(quantity=15), user_id=USER_ID)

    updated = products.update_product(
        product.id, ProductUpdate(quantity=3, historyNote="Large order"), user_id=USER_ID
    )

    assert sql_repository.get_product(product.id).quantity == 3
    entry = sql_repository.list_history()[0]
    assert (entry.change_type, entry.change_amount, entry.notes) == ("decrease", 12, "Large order")
    assert entry.timestamp == updated.updated_at


def test_delete_keeps_history(products, sql_repository):
    product = products.create_product(make_product(quantity=8), user_id=USER_ID)
    products.update_product(product.id, ProductUpdate(quantity=2), user_id=USER_ID)

    products.delete_product(product.id)

    assert sql_repository.get_product(product.id) is None
    history = HistoryService(sql_repository)
    assert history.list_history(product_id=product.id)["total"] == 2
    with pytest.raises(NotFoundError):
        history.product_history(product.id)


class FailingLedgerSqlRepository(SqlInventoryRepository):
    def add_history(self, entry):
        raise RuntimeError("ledger unavailable")


def test_failed_ledger_append_rolls_back(db, clock):
    service = ProductService(FailingLedgerSqlRepository(db), clock=clock)

    with pytest.raises(RuntimeError):
        service.create_product(make_product(), user_id=USER_ID)

    assert SqlInventoryRepository(db).list_products() == []


def test_seed_fills_empty_database_once(sql_repository):
    seed_repository(sql_repository)
    seed_repository(sql_repository)

    products = sql_repository.list_products()
    assert len(products) == len(PRODUCTS)
    # Listed in the seed order
    assert [p.id for p in products[:3]] == ["1", "2", "3"]
    assert len(sql_repository.list_history()) == 8
    assert sql_repository.find_user_by_email(ADMIN_EMAIL).role == "admin"


def test_seeded_history_filters(sql_repository):
    seed_repository(sql_repository)

    page = HistoryService(sql_repository).list_history(change_type="decrease", limit=2)

    assert [h.id for h in page["data"]] == ["h3", "h1"]
    assert page["total"] == 5
