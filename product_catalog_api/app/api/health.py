"""
Health check endpoint.

Mounted at the application root (outside the API prefix) so load
balancers and container probes have a stable path.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from product_catalog_api.app.api.deps import get_product_store
from product_catalog_api.app.services.product_store import ProductStore

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def health_check(
    request: Request,
    store: ProductStore = Depends(get_product_store),
) -> Dict[str, Any]:
    return {
        "status": "healthy",
        "products": len(store),
        "version": request.app.version,
    }
