"""Driver age surcharge rules."""

from decimal import Decimal

import pytest

from car_hire_api.app.services.pricing_service import calculate_price_per_day

BASE = Decimal("55.00")


class TestCalculatePricePerDay:

    @pytest.mark.parametrize("age", [17, 23, 24])
    def test_young_driver_surcharge(self, age):
        assert calculate_price_per_day(BASE, age) == Decimal("87.50")

    @pytest.mark.parametrize("age", [25, 30, 50, 74])
    def test_no_surcharge_between_thresholds(self, age):
        assert calculate_price_per_day(BASE, age) == BASE

    @pytest.mark.parametrize("age", [75, 76, 99])
    def test_senior_driver_surcharge(self, age):
        assert calculate_price_per_day(BASE, age) == Decimal("70.00")

    def test_boundaries(self):
        assert calculate_price_per_day(Decimal("25.00"), 24) == Decimal("57.50")
        assert calculate_price_per_day(Decimal("25.00"), 25) == Decimal("25.00")
        assert calculate_price_per_day(Decimal("25.00"), 74) == Decimal("25.00")
        assert calculate_price_per_day(Decimal("25.00"), 75) == Decimal("40.00")

    def test_base_price_is_not_modified(self):
        base = Decimal("30.00")
        calculate_price_per_day(base, 20)
        assert base == Decimal("30.00")
