"""
Application package initializer.

The project is split into ``core`` (configuration, logging,
middleware), ``schemas`` (pydantic models), ``services`` (storage
and business logic) and ``api`` (versioned routers).
"""

from .main import app, create_app  # noqa: F401
