"""Tests for ProductService result values and logging."""

import logging
from decimal import Decimal

import pytest

from product_catalog_api.app.services.results import Created, NotFound, Ok


def test_list_products(service):
    result = service.list_products()
    assert isinstance(result, Ok)
    assert [p.id for p in result.value] == [1, 2, 3]


def test_get_product(service):
    result = service.get_product(2)
    assert result == Ok(service.store.find(2))
    assert result.value.name == "Mouse"


@pytest.mark.parametrize("product_id", [0, 4, -1, 999])
def test_missing_ids_are_not_found(service, product_id):
    assert service.get_product(product_id) == NotFound(product_id)
    assert service.update_product(product_id, "x", "y", Decimal("1")) == NotFound(product_id)
    assert service.delete_product(product_id) == NotFound(product_id)
    assert len(service.store) == 3


def test_create_product(service):
    existing = [p.id for p in service.store.all()]
    result = service.create_product("Monitor", "4K display", Decimal("349.99"))
    assert isinstance(result, Created)
    assert result.resource_id == result.value.id == 4
    assert all(result.value.id > i for i in existing)
    assert len(service.store) == 4


def test_create_does_not_check_name_or_price(service):
    result = service.create_product("Laptop", "", Decimal("-5"))
    assert result.value.name == "Laptop"
    assert result.value.price == Decimal("-5")


def test_update_product(service):
    result = service.update_product(1, "Ultrabook", "Thin laptop", Decimal("1299.00"))
    assert isinstance(result, Ok)
    product = result.value
    assert (product.id, product.name, product.description, product.price) == (
        1,
        "Ultrabook",
        "Thin laptop",
        Decimal("1299.00"),
    )
    assert len(service.store) == 3
    assert service.list_products().value[0] == product


def test_delete_product(service):
    assert service.delete_product(2) == Ok(None)
    assert service.get_product(2) == NotFound(2)
    assert len(service.store) == 2


def test_scenario(service):
    created = service.create_product("Monitor", "4K display", Decimal("349.99"))
    assert created.resource_id == 4
    assert len(service.list_products().value) == 4

    assert service.delete_product(2) == Ok(None)
    assert service.get_product(2) == NotFound(2)
    assert [p.id for p in service.list_products().value] == [1, 3, 4]


def test_not_found_is_logged(service, caplog):
    with caplog.at_level(logging.INFO):
        service.delete_product(77)
    messages = [r.getMessage() for r in caplog.records]
    assert "Deleting product with ID: 77" in messages
    assert "Product with ID 77 not found for deletion" in messages
    assert any(r.levelno == logging.WARNING for r in caplog.records)
