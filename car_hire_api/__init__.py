"""
Top‑level package for the Car Hire API.

This file makes ``car_hire_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``car_hire_api.app.main``.  Keeping the marker file here lets the
tests import the application from the repository root.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
