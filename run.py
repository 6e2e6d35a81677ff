"""Entry point for the Product Catalog API.

Serves the FastAPI application with uvicorn.  Host and port come
from the ``HOST`` and ``PORT`` environment variables (see
``product_catalog_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from product_catalog_api.app.core.config import settings
from product_catalog_api.app.main import app


async def run_api() -> None:
    """Start the API server using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    asyncio.run(run_api())


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
