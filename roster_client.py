"""Sports roster API client.

A small wrapper around the roster REST API built on ``requests``.  Each
method returns a tuple ``(data, error)``: on success ``error`` is
``None``; on failure ``data`` is empty (``None``, ``[]`` or ``False``)
and ``error`` is a dictionary with ``status_code`` and ``message``.
Validation failures also carry the list of violated rules under
``errors``.

Example::

    client = RosterAPIClient(base_url="http://localhost:8000")
    team, error = client.create_team({"name": "Nova FC", "sport": "Football",
                                      "coach": "A. Ray", "location": "Porto"})
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class RosterAPIClient:
    """Client for the ``/api/v1`` team, player and dashboard endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Path prefix of the versioned API.
            session: Optional requests session.  A new one is created if
                not supplied.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON response."""
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
            return None, self._http_error(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _http_error(exc: requests.HTTPError) -> Error:
        response = exc.response
        status = response.status_code if response is not None else None
        error: Error = {"status_code": status, "message": str(exc)}
        if response is not None:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text
            if isinstance(detail, dict):
                error["errors"] = detail.get("errors", [])
                error["message"] = "; ".join(error["errors"]) or str(detail)
            elif detail:
                error["message"] = str(detail)
        logger.error("API request failed (%s): %s", status, error["message"])
        return error

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        params = {k: v for k, v in (params or {}).items() if v is not None}
        data, error = self._request("GET", path, params=params or None)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def _delete(self, path: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", path)
        return error is None, error

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------
    def list_teams(
        self,
        *,
        sport: Optional[str] = None,
        location: Optional[str] = None,
        name: Optional[str] = None,
        sort: Optional[str] = None,
        order: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(
            "/teams/",
            {"sport": sport, "location": location, "name": name, "sort": sort, "order": order},
        )

    def get_team(self, team_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/teams/{team_id}")

    def create_team(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/teams/", json_body=payload)

    def update_team(self, team_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/teams/{team_id}", json_body=payload)

    def delete_team(self, team_id: int) -> Tuple[bool, Optional[Error]]:
        return self._delete(f"/teams/{team_id}")

    def team_statistics(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/teams/stats")

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------
    def list_players(self, **filters: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """List players.

        Keyword arguments are passed through as query parameters, e.g.
        ``team_id=1``, ``position="Forward"``, ``top=5`` or
        ``free_agents=True``.
        """
        return self._list("/players/", filters)

    def get_player(self, player_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/players/{player_id}")

    def create_player(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/players/", json_body=payload)

    def update_player(self, player_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/players/{player_id}", json_body=payload)

    def delete_player(self, player_id: int) -> Tuple[bool, Optional[Error]]:
        return self._delete(f"/players/{player_id}")

    def player_statistics(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/players/stats")

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------
    def dashboard(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/dashboard/")

    def dashboard_stats(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/dashboard/stats")
