# tests/test_history_service.py
from datetime import datetime, timedelta, timezone

import pytest

from conftest import make_product
from inventory_api.errors import NotFoundError
from inventory_api.repositories.base import StockHistoryRecord
from inventory_api.schemas.product import ProductUpdate
from inventory_api.seed import seed_repository
from inventory_api.services.history import HistoryService
from inventory_api.services.products import ProductService


def _entry(entry_id, product_id, change_type, when, previous=10, new=5):
    return StockHistoryRecord(
        id=entry_id,
        product_id=product_id,
        product_name=f"Product {product_id}",
        previous_quantity=previous,
        new_quantity=new,
        change_amount=abs(new - previous),
        change_type=change_type,
        timestamp=when,
    )


@pytest.fixture
def seeded(repository):
    seed_repository(repository)
    return repository


def test_list_is_sorted_by_timestamp_not_insertion(repository):
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    # Inserted out of chronological order on purpose
    repository.add_history(_entry("b", "p1", "increase", base + timedelta(days=2)))
    repository.add_history(_entry("a", "p1", "decrease", base))
    repository.add_history(_entry("c", "p2", "decrease", base + timedelta(days=5)))

    page = HistoryService(repository).list_history()

    assert [h.id for h in page["data"]] == ["c", "b", "a"]
    assert page["total"] == 3
    assert page["offset"] == 0
    assert page["limit"] == 3


def test_filter_by_change_type_with_pagination(seeded):
    service = HistoryService(seeded)
    assert len(seeded.list_history()) == 8

    page = service.list_history(change_type="decrease", offset=0, limit=2)

    # h3 (Nov 26) and h1 (Nov 25) are the two most recent decreases
    assert [h.id for h in page["data"]] == ["h3", "h1"]
    assert all(h.change_type == "decrease" for h in page["data"])
    assert page["total"] == 5
    assert (page["offset"], page["limit"]) == (0, 2)


def test_offset_skips_entries(seeded):
    page = HistoryService(seeded).list_history(change_type="decrease", offset=2, limit=2)
    assert [h.id for h in page["data"]] == ["h5", "h7"]
    assert page["total"] == 5


def test_all_sentinel_and_product_filter(seeded):
    service = HistoryService(seeded)
    assert service.list_history(change_type="all")["total"] == 8

    page = service.list_history(product_id="2")
    assert [h.id for h in page["data"]] == ["h1"]


def test_limit_zero_returns_empty_page(seeded):
    page = HistoryService(seeded).list_history(limit=0)
    assert page["data"] == []
    assert page["total"] == 8
    assert page["limit"] == 0


def test_product_history(repository, user, clock):
    products = ProductService(repository, clock=clock)
    product = products.create_product(make_product(quantity=15), user_id=user.id)
    products.update_product(product.id, ProductUpdate(quantity=3), user_id=user.id)

    result = HistoryService(repository).product_history(product.id)

    assert result["product"] == {"id": product.id, "name": "Cordless Drill", "sku": "TL-DR-001"}
    assert [h.change_type for h in result["history"]] == ["decrease", "set"]


def test_product_history_of_deleted_product_is_not_found(repository, user, clock):
    products = ProductService(repository, clock=clock)
    history = HistoryService(repository)
    product = products.create_product(make_product(), user_id=user.id)
    products.delete_product(product.id)

    with pytest.raises(NotFoundError):
        history.product_history(product.id)
    # The entries themselves are still in the ledger
    assert history.list_history(product_id=product.id)["total"] == 1


def test_summary_counts(repository):
    now = datetime(2025, 6, 10, tzinfo=timezone.utc)
    repository.add_history(_entry("old", "p1", "increase", now - timedelta(days=30)))
    repository.add_history(_entry("edge", "p1", "decrease", now - timedelta(days=7)))
    repository.add_history(_entry("new", "p2", "set", now - timedelta(hours=1)))

    summary = HistoryService(repository, clock=lambda: now).summary()

    assert summary["total_changes"] == 3
    assert summary["increases"] == 1
    assert summary["decreases"] == 1
    # The 7-day boundary is inclusive
    assert summary["recent_changes"] == 2


def test_most_active_products(repository, user, clock):
    products = ProductService(repository, clock=clock)
    live = products.create_product(make_product(sku="LIVE-1", name="Live Product", quantity=1), user_id=user.id)
    for q in (2, 3, 4):
        products.update_product(live.id, ProductUpdate(quantity=q), user_id=user.id)

    when = datetime(2025, 1, 1, tzinfo=timezone.utc)
    for i in range(6):
        for n in range(2):
            repository.add_history(_entry(f"x{i}-{n}", f"gone-{i}", "decrease", when))

    summary = HistoryService(repository).summary()
    active = summary["most_active_products"]

    assert len(active) == 5
    assert active[0] == {"product_id": live.id, "product_name": "Live Product", "change_count": 4}
    counts = [a["change_count"] for a in active]
    assert counts == sorted(counts, reverse=True)
    assert all(a["product_name"] == "Unknown" for a in active[1:])
    # Ties keep the order the products were first met in the ledger
    assert [a["product_id"] for a in active[1:]] == ["gone-5", "gone-4", "gone-3", "gone-2"]
