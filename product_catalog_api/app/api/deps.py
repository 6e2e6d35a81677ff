"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from product_catalog_api.app.services.product_service import ProductService
from product_catalog_api.app.services.product_store import ProductStore


def get_product_store(request: Request) -> ProductStore:
    """Return the store owned by the running application."""
    return request.app.state.product_store


def get_product_service(request: Request) -> ProductService:
    return ProductService(get_product_store(request))
