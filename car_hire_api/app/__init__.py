"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: configuration and the in‑memory car store live in
``core``, request and response payloads in ``schemas``, business
logic in ``services`` and the HTTP routes in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
