"""Tests for the lock-guarded in-memory product store."""

import threading
from decimal import Decimal

import pytest
from pydantic import ValidationError

from product_catalog_api.app.services.product_store import FIRST_PRODUCT_ID, ProductStore


def test_seed_data(store):
    products = store.all()
    assert [p.id for p in products] == [1, 2, 3]
    assert [p.name for p in products] == ["Laptop", "Mouse", "Keyboard"]
    assert products[0].price == Decimal("999.99")


def test_seeded_stores_are_independent():
    first = ProductStore.with_seed_data()
    second = ProductStore.with_seed_data()
    first.remove(1)
    assert len(first) == 2
    assert len(second) == 3


def test_all_returns_snapshot(store):
    snapshot = store.all()
    store.add("Monitor", "4K display", Decimal("349.99"))
    assert len(snapshot) == 3
    assert len(store) == 4


def test_add_uses_max_id_plus_one(store):
    store.remove(2)
    product = store.add("Monitor", "4K display", Decimal("349.99"))
    assert product.id == 4
    assert store.all()[-1] == product


def test_add_to_empty_store_starts_at_first_id():
    store = ProductStore()
    product = store.add("Monitor", "4K display", Decimal("349.99"))
    assert product.id == FIRST_PRODUCT_ID == 1


def test_add_reuses_id_after_removing_max(store):
    store.remove(3)
    assert store.add("Webcam", "HD webcam", Decimal("59.00")).id == 3


def test_find_missing_returns_none(store):
    assert store.find(42) is None


def test_replace_keeps_position(store):
    updated = store.replace(2, "Trackball", "Ergonomic trackball", Decimal("49.50"))
    assert updated.id == 2
    assert [p.name for p in store.all()] == ["Laptop", "Trackball", "Keyboard"]


def test_replace_missing_returns_none(store):
    assert store.replace(42, "x", "y", Decimal("1")) is None
    assert len(store) == 3


def test_remove(store):
    assert store.remove(2) is True
    assert store.remove(2) is False
    assert [p.id for p in store.all()] == [1, 3]


def test_products_are_immutable(store):
    product = store.find(1)
    with pytest.raises(ValidationError):
        product.name = "Desktop"


def test_concurrent_adds_get_unique_ids():
    store = ProductStore()
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        for _ in range(25):
            store.add("Item", "Concurrent item", Decimal("1.00"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [p.id for p in store.all()]
    assert len(ids) == 200
    assert sorted(ids) == list(range(1, 201))
