"""
Domain errors raised by the car hire services.

Every error carries the HTTP status it maps to and a human readable
message.  The ``kind`` attribute names the error category exposed by
the API (``INVALID_INPUT`` or ``NOT_FOUND``).  Request validation
errors are produced by FastAPI itself and are mapped to
``INVALID_INPUT`` in ``api.error_handlers``.
"""

from fastapi import status

INVALID_INPUT = "INVALID_INPUT"
NOT_FOUND = "NOT_FOUND"


class CarHireError(Exception):
    """Base class for errors that end a single request."""

    kind = INVALID_INPUT
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class CarNotFoundError(CarHireError):
    """The referenced car id does not exist in the store."""

    kind = NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Car not found."

    def __init__(self, car_id: int) -> None:
        self.car_id = car_id
        super().__init__()


class NoEligibleCarsError(CarHireError):
    """No car accepts the requested driver age."""

    kind = NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "No available cars meet the age requirements."

    def __init__(self, driver_age: int) -> None:
        self.driver_age = driver_age
        super().__init__()
