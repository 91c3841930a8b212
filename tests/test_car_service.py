"""Car hire service operations."""

from decimal import Decimal

import pytest

from car_hire_api.app.core.errors import NOT_FOUND, CarNotFoundError, NoEligibleCarsError
from car_hire_api.app.schemas.car import CarUpdate


class TestListAvailableCars:

    def test_keeps_store_order(self, service):
        assert [car.id for car in service.list_available_cars(30)] == [1, 2, 3, 4, 5, 6]

    def test_young_driver(self, service):
        cars = service.list_available_cars(23)
        assert [car.id for car in cars] == [1, 2, 5, 6]
        assert [car.price_per_day for car in cars] == [
            Decimal("57.50"), Decimal("62.50"), Decimal("72.50"), Decimal("67.50"),
        ]

    def test_senior_driver(self, service):
        cars = {car.id: car for car in service.list_available_cars(76)}
        assert 4 not in cars
        assert cars[3].price_per_day == Decimal("70.00")

    def test_no_eligible_cars(self, service):
        with pytest.raises(NoEligibleCarsError) as exc_info:
            service.list_available_cars(20)
        assert exc_info.value.kind == NOT_FOUND
        assert exc_info.value.status_code == 404

    def test_uses_current_base_price(self, service, store):
        store.update(1, "Toyota", "Yaris", Decimal("26.00"))
        cars = service.list_available_cars(24)
        assert cars[0].price_per_day == Decimal("58.50")
        assert cars[0].model == "Yaris"


class TestUpdateCar:

    def test_price_is_new_base_price(self, service, store):
        data = CarUpdate(make="Tesla", model="Model Y", basePricePerDay=Decimal("80.00"))
        summary = service.update_car(4, data)
        assert summary.id == 4
        assert summary.price_per_day == Decimal("80.00")
        assert store.find_by_id(4).base_price_per_day == Decimal("80.00")

    def test_unknown_car(self, service):
        data = CarUpdate(make="Tesla", model="Model Y", basePricePerDay=Decimal("80.00"))
        with pytest.raises(CarNotFoundError) as exc_info:
            service.update_car(999, data)
        assert exc_info.value.car_id == 999
        assert exc_info.value.message == "Car not found."


class TestDeleteCar:

    def test_delete_then_not_found(self, service, store):
        service.delete_car(2)
        assert store.find_by_id(2) is None
        with pytest.raises(CarNotFoundError):
            service.delete_car(2)
