"""Exercise Tracker API client.

A thin wrapper around the REST API served by ``exercise_tracker.app``,
for scripts and bots that talk to a running server.  The client uses
the ``requests`` library internally; request bodies are form‑encoded,
as the API expects.

The client exposes one method per API operation:

* :meth:`create_user` – register a new user.
* :meth:`list_users` – list all users.
* :meth:`add_exercise` – log an exercise for a user.
* :meth:`get_logs` – fetch a user's log, optionally filtered.

Every method returns a tuple ``(data, error)``.  On success ``data``
holds the decoded JSON response and ``error`` is ``None``; on failure
``data`` is ``None`` and ``error`` is a dictionary with the keys
``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class ExerciseTrackerAPI:
    """Client for interacting with the exercise tracker API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            api_prefix: Prefix the JSON routes are mounted under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        data: Dict[str, Any] | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to the API prefix (e.g. ``/users``).
            params: Query parameters to include in the request.
            data: Form fields to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                data=data,
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
    def _drop_empty(values: Dict[str, Any]) -> Dict[str, Any]:
        return {key: value for key, value in values.items() if value is not None}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def create_user(self, username: str) -> Result:
        """Register ``username`` and return ``{"username", "id"}``."""
        return self._request("POST", "/users", data={"username": username})

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Return all users.  On failure the list is empty."""
        users, error = self._request("GET", "/users")
        return users or [], error

    # ------------------------------------------------------------------
    # Exercise operations
    # ------------------------------------------------------------------
    def add_exercise(
        self,
        user_id: str,
        description: str,
        duration: Any,
        date: Optional[str] = None,
    ) -> Result:
        """Log an exercise.  ``date`` (``yyyy-mm-dd``) defaults to today on the server."""
        payload = self._drop_empty(
            {"description": description, "duration": duration, "date": date}
        )
        return self._request("POST", f"/users/{user_id}/exercises", data=payload)

    def get_logs(
        self,
        user_id: str,
        *,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Result:
        """Fetch a user's log.  Only the filters that are set are sent."""
        params = self._drop_empty({"from": date_from, "to": date_to, "limit": limit})
        return self._request("GET", f"/users/{user_id}/logs", params=params or None)
