"""Car hire API client.

A thin wrapper around the Car Hire REST API using the ``requests``
library.  It exposes one method per operation:

* :meth:`list_available_cars` – cars a driver of a given age may hire.
* :meth:`update_car` – change make, model and base price of a car.
* :meth:`delete_car` – remove a car.

Methods never raise for HTTP or network failures.  Each returns a
tuple ``(data, error)``: on success ``error`` is ``None``; on failure
``data`` is empty and ``error`` is a dictionary with ``status_code``
and ``message`` keys.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CarHireAPI:
    """Client for the car hire endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and return ``(data, error)``."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Car operations
    # ------------------------------------------------------------------
    def list_available_cars(self, driver_age: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return the cars available to a driver of ``driver_age``.

        A driver no car accepts yields an error with status 404.
        """
        data, error = self._request("GET", "/carhire", params={"driverAge": driver_age})
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def update_car(
        self, car_id: int, make: str, model: str, base_price_per_day: float
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update a car and return its summary."""
        payload = {"make": make, "model": model, "basePricePerDay": base_price_per_day}
        return self._request("PUT", f"/carhire/{car_id}", json_body=payload)

    def delete_car(self, car_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a car.  Returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", f"/carhire/{car_id}")
        if error:
            return False, error
        return True, None
