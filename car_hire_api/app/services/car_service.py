"""
Service layer for car hire operations.

``CarHireService`` wraps a ``CarStore`` and implements the three
operations exposed by the API: listing the cars a driver may hire
(with age based pricing), updating a car and deleting a car.  Failures
are reported by raising ``CarHireError`` subclasses which the API
layer turns into HTTP responses.
"""

from __future__ import annotations

import logging
from typing import List

from car_hire_api.app.core.errors import CarNotFoundError, NoEligibleCarsError
from car_hire_api.app.core.store import CarStore
from car_hire_api.app.schemas.car import CarSummary, CarUpdate
from car_hire_api.app.services.pricing_service import calculate_price_per_day

logger = logging.getLogger(__name__)


class CarHireService:
    """Business operations over a car store."""

    def __init__(self, store: CarStore) -> None:
        self.store = store

    def list_available_cars(self, driver_age: int) -> List[CarSummary]:
        """Return the cars a driver of ``driver_age`` may hire.

        Cars are kept when ``min_age_requirement <= driver_age <=
        max_age_requirement`` and priced with the driver age surcharge.
        Store order is preserved.  An empty result is reported as
        ``NoEligibleCarsError`` rather than an empty list.
        """
        with self.store.lock:
            available = [
                CarSummary(
                    id=car.id,
                    make=car.make,
                    model=car.model,
                    price_per_day=calculate_price_per_day(car.base_price_per_day, driver_age),
                )
                for car in self.store.scan()
                if car.accepts_driver(driver_age)
            ]
        if not available:
            logger.info("No cars available for driver age %s", driver_age)
            raise NoEligibleCarsError(driver_age)
        logger.debug("%d cars available for driver age %s", len(available), driver_age)
        return available

    def update_car(self, car_id: int, data: CarUpdate) -> CarSummary:
        """Overwrite make, model and base price of a car.

        The returned ``price_per_day`` is the new base price: no driver
        age is known here, so no surcharge applies.
        """
        car = self.store.update(car_id, data.make, data.model, data.base_price_per_day)
        if car is None:
            logger.info("Update of unknown car %s", car_id)
            raise CarNotFoundError(car_id)
        logger.info("Updated car %s", car_id)
        return CarSummary(
            id=car.id,
            make=car.make,
            model=car.model,
            price_per_day=car.base_price_per_day,
        )

    def delete_car(self, car_id: int) -> None:
        """Remove a car from the store for good."""
        if not self.store.remove(car_id):
            logger.info("Delete of unknown car %s", car_id)
            raise CarNotFoundError(car_id)
        logger.info("Deleted car %s", car_id)
