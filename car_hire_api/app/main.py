"""
Main entrypoint for the Car Hire API.

This module assembles the FastAPI application: it sets up logging,
creates the seeded car store owned by the application, registers the
error handlers and includes the versioned router.  The ``create_app``
function builds a new, independent application (with its own store)
on each call; ``app`` is instantiated at import time so that it can be
served directly::

    uvicorn car_hire_api.app.main:app --reload
"""

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import create_store


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance with a freshly
        seeded car store on ``app.state.car_store``.
    """
    # Initialise logging before anything else so that the store seeding
    # below is logged.
    setup_logging(settings.log_level, settings.log_file, debug=settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.car_store = create_store()

    register_error_handlers(app)
    app.include_router(v1_router)

    return app


app = create_app()
