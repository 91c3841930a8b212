"""
Pydantic schemas for cars.

The JSON representation uses camelCase field names (``pricePerDay``,
``basePricePerDay``) while the Python attributes are snake_case.
Prices are handled as ``Decimal`` internally and rendered as JSON
numbers.
"""

import re
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_serializer

_INTEGER_RE = re.compile(r"\s*[+-]?\d+\s*")


def _plain_integer(value: Any) -> Any:
    # Query and path values arrive as strings; "30.0" and "3e1" are rejected.
    if isinstance(value, str) and not _INTEGER_RE.fullmatch(value):
        raise ValueError("The value is not a valid integer.")
    return value


PlainInt = Annotated[int, BeforeValidator(_plain_integer)]


class CarUpdate(BaseModel):
    """Request body for updating a car.

    Only ``make``, ``model`` and the base price can be changed; the id
    and the age requirements are not exposed.
    """

    model_config = ConfigDict(populate_by_name=True)

    make: str = Field(..., min_length=2, max_length=100, description="Manufacturer name")
    model: str = Field(..., min_length=2, max_length=100, description="Model name")
    base_price_per_day: Decimal = Field(
        ...,
        alias="basePricePerDay",
        gt=0,
        description="Price per day before any driver age surcharge",
    )


class CarSummary(BaseModel):
    """Car as returned by the API, with a computed price per day."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    make: str
    model: str
    price_per_day: Decimal = Field(..., alias="pricePerDay")

    @field_serializer("price_per_day", when_used="json")
    def serialize_price(self, value: Decimal) -> float:
        return float(value)


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
