"""
Global exception handlers.

* ``CarHireError`` → ``{"detail": message}`` with the error's status.
* ``RequestValidationError`` → HTTP 400 with the messages grouped per
  field (camelCase names as sent by the client).
* Any other exception → HTTP 500 without internal details.
"""

import logging
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from car_hire_api.app.core.errors import CarHireError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_car_hire_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_car_hire_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CarHireError)
    async def car_hire_error_handler(request: Request, exc: CarHireError):
        logger.info("%s on %s: %s", exc.kind, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "One or more validation errors occurred.",
                "errors": _group_errors_by_field(exc),
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch‑all; never leaks internal details."""
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred"},
        )


def _group_errors_by_field(exc: RequestValidationError) -> Dict[str, List[str]]:
    # loc is e.g. ("query", "driverAge") or ("body", "make"); a missing
    # body only has ("body",) and malformed JSON has ("body", <offset>).
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = error.get("loc", ())
        if error.get("type") == "json_invalid":
            field = "body"
        else:
            field = ".".join(str(part) for part in loc[1:]) or ".".join(str(part) for part in loc)
        errors.setdefault(field, []).append(error["msg"])
    return errors
