"""
In‑memory car store.

The store holds the authoritative list of cars for the lifetime of
the process.  It is seeded with six fixed cars when created and is
never persisted or reloaded.  One store is created per application
instance (see ``main.create_app``) and handed to the request handlers
through the ``get_store`` dependency, so there is no module level
mutable state.

All access goes through a single re‑entrant lock.  Handlers run in
FastAPI's threadpool, so updates, deletes and the scan‑then‑filter
read of the listing endpoint must not interleave.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional

from fastapi import Request

logger = logging.getLogger(__name__)

DEFAULT_MIN_AGE = 23
DEFAULT_MAX_AGE = 99


@dataclass
class Car:
    """A car available for hire.

    ``id`` is assigned at seed time and never changes.  Only ``make``,
    ``model`` and ``base_price_per_day`` are mutable through the API.
    The eligibility range ``[min_age_requirement, max_age_requirement]``
    is inclusive; ``min <= max`` is expected of the seed data but not
    checked.
    """

    id: int
    make: str
    model: str
    base_price_per_day: Decimal
    min_age_requirement: int = DEFAULT_MIN_AGE
    max_age_requirement: int = DEFAULT_MAX_AGE

    def accepts_driver(self, driver_age: int) -> bool:
        return self.min_age_requirement <= driver_age <= self.max_age_requirement


def seed_cars() -> List[Car]:
    """Return fresh copies of the six cars every store starts with."""
    return [
        Car(1, "Toyota", "Corolla", Decimal("25.00")),
        Car(2, "Ford", "Fiesta", Decimal("30.00")),
        Car(3, "BMW", "3 Series", Decimal("55.00"), min_age_requirement=25, max_age_requirement=80),
        Car(4, "Tesla", "Model 3", Decimal("70.00"), min_age_requirement=25, max_age_requirement=75),
        Car(5, "Volkswagen", "Golf", Decimal("40.00"), max_age_requirement=85),
        Car(6, "Honda", "Civic", Decimal("35.00"), max_age_requirement=90),
    ]


class CarStore:
    """Ordered collection of cars guarded by a single lock."""

    def __init__(self, cars: Optional[Iterable[Car]] = None) -> None:
        self._cars: List[Car] = list(cars or [])
        self.lock = threading.RLock()

    def __len__(self) -> int:
        with self.lock:
            return len(self._cars)

    def find_by_id(self, car_id: int) -> Optional[Car]:
        """Return the car with ``car_id`` or ``None``."""
        with self.lock:
            for car in self._cars:
                if car.id == car_id:
                    return car
            return None

    def scan(self) -> List[Car]:
        """Return all cars in insertion order.

        The returned list is a snapshot; removing cars afterwards does
        not change it.
        """
        with self.lock:
            return list(self._cars)

    def update(self, car_id: int, make: str, model: str, base_price_per_day: Decimal) -> Optional[Car]:
        """Overwrite the mutable fields of a car in place.

        Returns the updated car, or ``None`` when ``car_id`` is unknown
        (the store is left untouched in that case).
        """
        with self.lock:
            car = self.find_by_id(car_id)
            if car is None:
                return None
            car.make = make
            car.model = model
            car.base_price_per_day = base_price_per_day
            return car

    def remove(self, car_id: int) -> bool:
        """Remove the car with ``car_id``.

        Returns ``True`` if a car was removed, ``False`` otherwise.
        """
        with self.lock:
            car = self.find_by_id(car_id)
            if car is None:
                return False
            self._cars.remove(car)
            return True


def create_store() -> CarStore:
    """Build a store seeded with the fixed catalogue."""
    store = CarStore(seed_cars())
    logger.info("Car store seeded with %d cars", len(store))
    return store


def get_store(request: Request) -> CarStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.car_store
