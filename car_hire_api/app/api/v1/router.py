"""
Top‑level router for version 1 of the API.

Aggregates the endpoint routers.  The car hire routes keep the
``/carhire`` path used by existing clients.
"""

from fastapi import APIRouter

from .endpoints import carhire, info

router = APIRouter()

router.include_router(carhire.router, prefix="/carhire", tags=["carhire"])
router.include_router(info.router, prefix="/info", tags=["info"])
