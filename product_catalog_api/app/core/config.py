"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all.  Tests and embedding
code may construct their own ``Settings`` instance and hand it to
``create_app`` instead of relying on the module level ``settings``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  When empty, logs go to the console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Emit one log line per HTTP request and stamp ``X-Request-ID``.
    log_requests: bool = _env_flag("LOG_REQUESTS", "true")

    # Prefix under which the products routes are mounted.  The default
    # exposes the collection at ``/api/products``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Start with the three demonstration products (Laptop, Mouse,
    # Keyboard).  Disable to start from an empty collection.
    seed_products: bool = _env_flag("SEED_PRODUCTS", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
