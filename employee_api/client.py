"""Employee API client.

A thin wrapper around the REST API served by ``employee_api.app``.
The client uses the ``requests`` library and exposes one method per
operation:

* :meth:`EmployeeClient.create_employee` – ``POST /api/employees``
* :meth:`EmployeeClient.list_employees` – ``GET /api/employees``
* :meth:`EmployeeClient.get_employee` – ``GET /api/employees/{id}``
* :meth:`EmployeeClient.update_employee` – ``PUT /api/employees/{id}``
* :meth:`EmployeeClient.delete_employee` – ``DELETE /api/employees/{id}``

Every method returns a ``(data, error)`` tuple instead of raising.  On
success ``error`` is ``None``; on failure ``data`` is empty and
``error`` is a dictionary with ``status_code`` and ``message`` keys.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class EmployeeClient:
    """Client for the employee REST API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api/employees",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            prefix: Path of the employee collection.
            timeout: Timeout in seconds applied to every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = prefix
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` with the parsed JSON response or
            an error description.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
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

    def _item_path(self, employee_id: Any) -> str:
        return f"{self.prefix}/{employee_id}"

    @staticmethod
    def _payload(first_name: str, last_name: str, email: str) -> Dict[str, str]:
        return {"firstName": first_name, "lastName": last_name, "email": email}

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def create_employee(
        self, first_name: str, last_name: str, email: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an employee and return the stored record including its id."""
        return self._request("POST", self.prefix, json_body=self._payload(first_name, last_name, email))

    def list_employees(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all employees.

        Returns:
            A tuple ``(employees, error)``.  ``employees`` is empty on
            failure.
        """
        data, error = self._request("GET", self.prefix)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_employee(self, employee_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._item_path(employee_id))

    def update_employee(
        self, employee_id: Any, first_name: str, last_name: str, email: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace all fields of an employee."""
        return self._request(
            "PUT",
            self._item_path(employee_id),
            json_body=self._payload(first_name, last_name, email),
        )

    def delete_employee(self, employee_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete an employee.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._item_path(employee_id))
        if error:
            return False, error
        return True, None
