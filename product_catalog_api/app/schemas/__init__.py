"""
Pydantic schema definitions for API payloads.

Request bodies (``ProductCreate``, ``ProductUpdate``) are kept apart
from the stored ``Product`` record so the server assigned ``id`` can
never be supplied by a client.
"""
