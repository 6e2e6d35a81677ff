"""
Top-level package for the Product Catalog API.

All functionality lives in submodules under ``app``; the ASGI
application is ``product_catalog_api.app.main:app``.
"""

__all__ = []
