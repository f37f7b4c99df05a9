# tests/conftest.py
"""
Shared fixtures.

Every test gets its own in-memory repository; the app's repository dependency
is overridden so HTTP tests and service tests see the same store.
"""
import logging
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from inventory_api.dependencies import get_repository
from inventory_api.main import app
from inventory_api.repositories.base import UserRecord
from inventory_api.repositories.memory import MemoryInventoryRepository
from inventory_api.schemas.product import ProductCreate
from inventory_api.utils.hashing import get_password_hash
from inventory_api.utils.tokenJWT import token_for_user

# Suppress noisy logs during tests for cleaner output
logging.getLogger("inventory_api").setLevel(logging.WARNING)
logging.getLogger("passlib").setLevel(logging.ERROR)

TEST_EMAIL = "tester@inventory.com"
TEST_PASSWORD = "secret123"

# bcrypt is slow on purpose, hash once per session
_PASSWORD_HASH = get_password_hash(TEST_PASSWORD)


class FakeClock:
    """Deterministic clock; every call moves one second forward."""

    def __init__(self, start=datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


def make_product(**overrides) -> ProductCreate:
    data = {
        "name": "Cordless Drill",
        "category": "Tools & Hardware",
        "sku": "TL-DR-001",
        "quantity": 15,
        "price": 99.5,
        "supplier": "BuildRight Tools",
    }
    data.update(overrides)
    return ProductCreate(**data)


@pytest.fixture
def repository():
    repo = MemoryInventoryRepository()
    repo.save_user(UserRecord(
        id="u-1",
        name="Test User",
        email=TEST_EMAIL,
        password_hash=_PASSWORD_HASH,
        role="admin",
    ))
    return repo


@pytest.fixture
def user(repository):
    return repository.get_user("u-1")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client(repository):
    """TestClient wired to the per-test repository."""
    app.dependency_overrides[get_repository] = lambda: repository
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(get_repository, None)


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {token_for_user(user)}"}
