import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.main import create_app
from product_catalog_api.app.services.product_service import ProductService
from product_catalog_api.app.services.product_store import ProductStore


@pytest.fixture
def app():
    """A fresh application with its own seeded store."""
    return create_app(Settings(seed_products=True, log_requests=True, api_prefix="/api"))


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def store():
    return ProductStore.with_seed_data()


@pytest.fixture
def service(store):
    return ProductService(store)


@pytest.fixture
def monitor():
    """A valid product payload."""
    return {"name": "Monitor", "description": "4K display", "price": 349.99}
