"""
API package containing versioned routes.

A version subpackage such as ``v1`` exposes a top‑level ``router``
which includes all of its endpoints.  Global exception handlers are
registered from ``error_handlers``.
"""
