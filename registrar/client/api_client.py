"""
HTTP client for the Registrar REST API.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:5000"


class ClientError(Exception):
    """A human-readable failure to show inline; carries no error codes."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def default_base_url() -> str:
    """Base URL from ``REGISTRAR_BASE_URL``, falling back to the local server."""
    return os.environ.get("REGISTRAR_BASE_URL") or DEFAULT_BASE_URL


class RegistrarClient:
    """Thin wrapper over the REST surface.

    ``http`` is anything with requests-style ``get``/``post``/``put``
    methods: a ``requests.Session`` by default, or a FastAPI ``TestClient``.
    """

    def __init__(self, base_url: Optional[str] = None, http: Any = None, timeout: float = 10.0):
        self._base_url = (default_base_url() if base_url is None else base_url).rstrip("/")
        self._http = http if http is not None else requests.Session()
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def _request(self, method: str, path: str, fallback: str, use_server_message: bool = False,
                 body: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self._base_url}{path}"
        kwargs: Dict[str, Any] = {"timeout": self._timeout}
        if body is not None:
            kwargs["json"] = body

        try:
            response = getattr(self._http, method)(url, **kwargs)
        except Exception as e:
            logger.debug("%s %s failed: %s", method.upper(), url, e)
            raise ClientError(fallback) from e

        if not 200 <= response.status_code < 300:
            message = fallback
            if use_server_message:
                try:
                    data = response.json()
                except ValueError:
                    data = {}
                if isinstance(data, dict) and data.get("message"):
                    message = data["message"]
            raise ClientError(message)

        try:
            return response.json()
        except ValueError as e:
            raise ClientError(fallback) from e

    def register(self, full_name: str, email: str, student_id: str, password: str) -> Dict[str, Any]:
        """Create an account; returns ``{id, fullName, email, studentId}``."""
        body = {"fullName": full_name, "email": email, "studentId": student_id, "password": password}
        return self._request("post", "/api/register", "Registration failed.", True, body)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Authenticate; returns the profile including ``courses``."""
        body = {"email": email, "password": password}
        return self._request("post", "/api/login", "Login failed.", True, body)

    def get_all_courses(self) -> List[Dict[str, Any]]:
        return self._request("get", "/api/courses", "Failed to load courses.")

    def get_student_courses(self, student_id: str) -> List[Dict[str, Any]]:
        return self._request("get", f"/api/students/{student_id}/courses", "Failed to load student courses.")

    def update_student_courses(self, student_id: str, courses: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Replace the student's whole list; returns what the server persisted."""
        return self._request("put", f"/api/students/{student_id}/courses", "Failed to update courses.",
                             body={"courses": courses})
