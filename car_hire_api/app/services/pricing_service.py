"""
Driver age pricing.

The price per day of a car is its base price plus at most one fixed
surcharge depending on the driver's age bracket:

* drivers younger than 25 pay a young driver surcharge of 32.50;
* drivers aged 75 or older pay a senior driver surcharge of 15.00;
* everybody else pays the base price.

The thresholds and amounts are constants and cannot be changed at
runtime.
"""

from decimal import Decimal

YOUNG_DRIVER_SURCHARGE = Decimal("32.50")
SENIOR_DRIVER_SURCHARGE = Decimal("15.00")
YOUNG_DRIVER_AGE_THRESHOLD = 25
SENIOR_DRIVER_AGE_THRESHOLD = 75


def calculate_price_per_day(base_price: Decimal, driver_age: int) -> Decimal:
    """Return the price per day for a driver of ``driver_age``.

    A driver aged exactly 25 pays no surcharge; a driver aged exactly
    75 pays the senior surcharge.
    """
    if driver_age < YOUNG_DRIVER_AGE_THRESHOLD:
        return base_price + YOUNG_DRIVER_SURCHARGE
    if driver_age >= SENIOR_DRIVER_AGE_THRESHOLD:
        return base_price + SENIOR_DRIVER_SURCHARGE
    return base_price
