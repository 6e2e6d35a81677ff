"""
Main entrypoint for the Product Catalog API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``.  Importing the app here makes it easy to run with
uvicorn or another ASGI server, e.g.::

    uvicorn product_catalog_api.app.main:app --reload

Each application owns its own ``ProductStore`` on ``app.state``, so
two apps built by ``create_app`` never share products.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api import health
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.middleware import RequestLoggingMiddleware
from .services.product_store import ProductStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance with its own
        product store.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if settings.seed_products:
        app.state.product_store = ProductStore.with_seed_data()
    else:
        app.state.product_store = ProductStore()
    logger.info("Product store initialised with %d products", len(app.state.product_store))

    if settings.log_requests:
        app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health.router, tags=["health"])
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
