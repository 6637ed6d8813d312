"""Users API client.

A thin wrapper around the Users HTTP API built on ``requests``.  It is
handy for smoke checks against a running server and for scripting
imports into the service.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list for
:meth:`UsersAPI.list_users`) and ``error`` is a dictionary with the
keys ``status_code`` and ``message``.  The message is taken from the
server's ``{"message": ...}`` envelope when there is one.  Transport
failures (connection refused, timeouts) are reported the same way with
``status_code`` set to ``None``.

Run the module directly to exercise a server on ``localhost:4000``::

    python users_api_client.py http://localhost:4000
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class UsersAPI:
    """Client for the ``/api/users`` resource."""

    def __init__(
        self,
        base_url: str = "http://localhost:4000",
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Server root, e.g. ``http://localhost:4000``.
            session: Optional requests session.  One is created when
                not supplied.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON response.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send (for POST/PUT).
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
                    message = exc.response.json().get("message") or ""
                except (ValueError, AttributeError):
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users."""
        data, error = self._request("GET", "/api/users")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def create_user(self, username: str, age: int, hobbies: List[str]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user and return it with its generated ``id``."""
        payload = {"username": username, "age": age, "hobbies": list(hobbies)}
        return self._request("POST", "/api/users", json_body=payload)

    def get_user(self, user_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single user by ID."""
        return self._request("GET", f"/api/users/{user_id}")

    def update_user(self, user_id: str, **fields: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update ``username``, ``age`` and/or ``hobbies`` of a user.

        Only the keyword arguments passed are sent, so omitted fields
        keep their stored values.
        """
        return self._request("PUT", f"/api/users/{user_id}", json_body=fields)

    def delete_user(self, user_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete a user.  Returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", f"/api/users/{user_id}")
        if error:
            return False, error
        return True, None


def main(argv: List[str]) -> int:
    logging.basicConfig(level=logging.INFO)
    client = UsersAPI(argv[1] if len(argv) > 1 else "http://localhost:4000")

    users, error = client.list_users()
    if error:
        return 1
    print("Get all users:", users)

    user, error = client.create_user("John", 30, ["reading", "gaming"])
    if error:
        return 1
    print("Created user:", user)

    fetched, error = client.get_user(user["id"])
    if error:
        return 1
    print("Get user by ID:", fetched)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
