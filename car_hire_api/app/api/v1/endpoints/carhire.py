"""
Car hire endpoints for API v1.

These routes list the cars a driver may hire (priced for the driver's
age), update the editable details of a car and delete cars.  Query,
path and body parameters are validated by FastAPI before the handler
runs, so invalid input never reaches the store.

Handlers are plain functions: FastAPI runs them in its threadpool and
the store lock serializes concurrent requests.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Query

from car_hire_api.app.core.store import CarStore, get_store
from car_hire_api.app.schemas.car import CarSummary, CarUpdate, MessageResponse, PlainInt
from car_hire_api.app.services.car_service import CarHireService

router = APIRouter()


def get_car_service(store: CarStore = Depends(get_store)) -> CarHireService:
    return CarHireService(store)


@router.get("", response_model=List[CarSummary])
def get_available_cars(
    driver_age: PlainInt = Query(..., alias="driverAge", description="Age of the driver"),
    service: CarHireService = Depends(get_car_service),
) -> List[CarSummary]:
    """Return the cars available to a driver, with their price per day.

    Returns HTTP 404 when no car accepts the given age.
    """
    return service.list_available_cars(driver_age)


@router.put("/{id}", response_model=CarSummary)
def modify_car(
    car_in: CarUpdate,
    car_id: PlainInt = Path(..., alias="id", description="Id of the car"),
    service: CarHireService = Depends(get_car_service),
) -> CarSummary:
    """Update make, model and base price of a car.

    The returned ``pricePerDay`` is the new base price without any
    driver age surcharge.  Returns HTTP 404 if the car does not exist.
    """
    return service.update_car(car_id, car_in)


@router.delete("/{id}", response_model=MessageResponse)
def delete_car(
    car_id: PlainInt = Path(..., alias="id", description="Id of the car"),
    service: CarHireService = Depends(get_car_service),
) -> MessageResponse:
    """Delete a car.  Returns HTTP 404 if the car does not exist."""
    service.delete_car(car_id)
    return MessageResponse(message=f"Car with ID {car_id} has been deleted successfully.")
