"""Standup Scheduler API client.

A thin wrapper around the REST API served by ``standup_scheduler``.
Every method returns a tuple ``(data, error)``: on success ``data`` is
the ``data`` member of the response envelope and ``error`` is
``None``; on failure ``data`` is ``None`` and ``error`` is a dictionary
with ``status_code`` and ``message``.

Note that some "empty" answers are successes: ``next_standup`` returns
``([], None)`` when nothing is scheduled and ``list_activities``
returns ``([], None)`` for a standup without activities, while
``previous_standups`` and the roster lookups report an empty result as
an error with status 400.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class StandupAPIClient:
    """Client for the standup scheduling API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including any prefix, e.g.
                ``https://standups.example.com``.
            timeout: Seconds to wait for each request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, params: Dict[str, Any] | None = None,
                 json_body: Any | None = None) -> Result:
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
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.ok and isinstance(body, dict) and body.get("status") == "success":
            return body.get("data"), None

        message = ""
        if isinstance(body, dict):
            message = body.get("message") or body.get("detail") or ""
        if not message:
            message = response.text or f"HTTP {response.status_code}"
        logger.error("API request failed (%s): %s", response.status_code, message)
        return None, {"status_code": response.status_code, "message": message}

    @staticmethod
    def _iso(value: datetime | str) -> str:
        return value.isoformat() if isinstance(value, datetime) else value

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------
    def list_users(self) -> Result:
        return self._request("GET", "/users")

    def get_team(self, team_id: int) -> Result:
        return self._request("GET", f"/teamname/{team_id}")

    def list_team_members(self, team_id: int) -> Result:
        return self._request("GET", f"/teams/members/{team_id}")

    # ------------------------------------------------------------------
    # Standups
    # ------------------------------------------------------------------
    def previous_standups(self, team_id: int, limit: Optional[int] = None) -> Result:
        params = {"limit": limit} if limit is not None else None
        return self._request("GET", f"/standups/previous/{team_id}", params=params)

    def next_standup(self, team_id: int) -> Result:
        """Return ``([standup], None)``, or ``([], None)`` if nothing is scheduled."""
        return self._request("GET", f"/standups/next/{team_id}")

    def get_standup(self, standup_id: int) -> Result:
        return self._request("GET", f"/standups/{standup_id}")

    def create_standup(
        self,
        team_id: int,
        *,
        time: datetime | str,
        chair_id: int,
        meeting_link: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Result:
        body = {"time": self._iso(time), "chair_id": chair_id, "meeting_link": meeting_link, "notes": notes}
        return self._request("POST", f"/standups/{team_id}", json_body=body)

    def update_standup(
        self,
        standup_id: int,
        *,
        time: datetime | str,
        chair_id: int,
        meeting_link: Optional[str] = None,
    ) -> Result:
        body = {"time": self._iso(time), "chair_id": chair_id, "meeting_link": meeting_link}
        return self._request("PUT", f"/standups/{standup_id}", json_body=body)

    def update_standup_notes(self, standup_id: int, notes: str) -> Result:
        return self._request("PUT", f"/standups/notes/{standup_id}", json_body={"notes": notes})

    # ------------------------------------------------------------------
    # Activities
    # ------------------------------------------------------------------
    def list_activities(self, standup_id: int) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Dict[str, Any]]]:
        return self._request("GET", f"/standups/activities/{standup_id}")

    def create_activity(
        self,
        standup_id: int,
        *,
        user_id: int,
        name: str,
        url: Optional[str] = None,
        comment: Optional[str] = None,
    ) -> Result:
        body = {"user_id": user_id, "name": name, "url": url, "comment": comment}
        return self._request("POST", f"/activity/{standup_id}", json_body=body)

    def update_activity(
        self,
        activity_id: int,
        *,
        name: str,
        url: Optional[str] = None,
        comment: Optional[str] = None,
    ) -> Result:
        body = {"name": name, "url": url, "comment": comment}
        return self._request("PUT", f"/activity/{activity_id}", json_body=body)
