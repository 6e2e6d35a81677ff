"""
Top-level router for version 1 of the API.

This router aggregates domain-specific routers under a unified
prefix.  When new resources are introduced, include their routers
here.
"""

from fastapi import APIRouter

from .endpoints import products

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
