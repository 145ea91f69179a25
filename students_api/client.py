"""Students API client.

This module defines a small client wrapper around the Students REST
API.  It uses the ``requests`` library internally and exposes one
method per route:

* :meth:`health` – check that the service is up.
* :meth:`create_student` – create a student and return its id.
* :meth:`get_student` – fetch a single student by its identifier.
* :meth:`list_students` – return all students.
* :meth:`update_student` – replace a student's name, email and age.
* :meth:`delete_student` – remove a student.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  The message is
taken from the ``error`` field of the service's error payload when
one is present.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class StudentsAPI:
    """Client for interacting with the Students API."""

    STUDENTS_PATH = "/api/students"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8082``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``.
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
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _payload(name: str, email: str, age: int) -> Dict[str, Any]:
        return {"name": name, "email": email, "age": age}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def health(self) -> Tuple[bool, Optional[Error]]:
        data, error = self._request("GET", "/health")
        if error:
            return False, error
        return bool(data) and data.get("status") == "healthy", None

    def create_student(self, name: str, email: str, age: int) -> Tuple[Optional[int], Optional[Error]]:
        """Create a student.

        Returns:
            A tuple ``(student_id, error)``.
        """
        data, error = self._request("POST", self.STUDENTS_PATH, json_body=self._payload(name, email, age))
        if error:
            return None, error
        return data.get("id"), None

    def get_student(self, student_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"{self.STUDENTS_PATH}/{student_id}")
        if error:
            return None, error
        return data, None

    def list_students(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all students.

        Returns:
            A tuple ``(students, error)``. ``students`` is empty on failure.
        """
        data, error = self._request("GET", self.STUDENTS_PATH)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def update_student(
        self, student_id: int, name: str, email: str, age: int
    ) -> Tuple[bool, Optional[Error]]:
        _, error = self._request(
            "PUT",
            f"{self.STUDENTS_PATH}/{student_id}",
            json_body=self._payload(name, email, age),
        )
        if error:
            return False, error
        return True, None

    def delete_student(self, student_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"{self.STUDENTS_PATH}/{student_id}")
        if error:
            return False, error
        return True, None
