"""
Version 1 of the API.

Breaking changes to the product representation or routes should be
introduced in a new version subpackage (e.g. ``v2``).
"""
