"""
API package containing versioned routes and shared dependencies.

Versioned resource routes live under ``v1``.  Unversioned routes that
are mounted at the application root, such as ``health``, sit directly
in this package.
"""
