"""
Information endpoint for API v1.

Returns the service name and version together with the number of cars
currently held by the store.  Useful as a liveness probe.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from car_hire_api.app.core.config import settings
from car_hire_api.app.core.store import CarStore, get_store

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
def get_info(store: CarStore = Depends(get_store)) -> Dict[str, Any]:
    return {"name": settings.project_name, "version": settings.api_version, "cars": len(store)}
