# tests/test_stock_status.py
import pytest

from inventory_api.services.stock_status import (
    DEFAULT_MIN_STOCK,
    listing_stock_band,
    stock_status,
)


@pytest.mark.parametrize(
    "quantity, min_stock, expected",
    [
        (0, 10, "critical"),
        (-3, 10, "critical"),
        (1, 10, "low"),
        (10, 10, "low"),
        (11, 10, "sufficient"),
        (0, 0, "critical"),
        (1, 0, "sufficient"),
    ],
)
def test_stock_status_against_threshold(quantity, min_stock, expected):
    assert stock_status(quantity, min_stock) == expected


def test_stock_status_properties_hold_over_a_range():
    for m in range(0, 20):
        for q in range(-5, 40):
            result = stock_status(q, m)
            assert (result == "critical") == (q <= 0)
            assert (result == "low") == (0 < q <= m)
            assert (result == "sufficient") == (q > m)


def test_stock_status_defaults_to_ten():
    assert DEFAULT_MIN_STOCK == 10
    assert stock_status(10) == "low"
    assert stock_status(11) == "sufficient"
    assert stock_status(10, None) == "low"


@pytest.mark.parametrize(
    "quantity, expected",
    [
        (0, "critical"),
        (5, "critical"),
        (6, "low"),
        (15, "low"),
        (16, "sufficient"),
    ],
)
def test_listing_band_uses_fixed_limits(quantity, expected):
    assert listing_stock_band(quantity) == expected


def test_policies_are_independent():
    # 12 units with minStock 10: enough for the product, "low" for the listing
    assert stock_status(12, 10) == "sufficient"
    assert listing_stock_band(12) == "low"
