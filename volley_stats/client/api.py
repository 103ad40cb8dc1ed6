"""
➡️ But : Client REST (httpx) de l'API de statistiques.

Une méthode par endpoint. Les réponses d'erreur sont converties dans la
taxonomie commune :
- 400 -> ValidationError
- 404 -> NotFoundError
- autre échec HTTP ou réseau -> StorageError

Le client accepte n'importe quel httpx.Client (y compris le TestClient de FastAPI).
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from volley_stats.core.errors import NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000"


class ApiClient:
    def __init__(
        self,
        http: Optional[httpx.Client] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        api_prefix: str = "/api",
        timeout: float = 10.0,
    ):
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)
        self.api_prefix = api_prefix.rstrip("/")

    def close(self) -> None:
        self.http.close()

    # ---------- Helpers ----------

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            detail = response.json().get("detail")
        except ValueError:
            detail = None
        return str(detail or response.reason_phrase or response.status_code)

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        url = f"{self.api_prefix}{path}"
        try:
            response = self.http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise StorageError(f"Request failed: {exc}") from exc

        if response.status_code == 400:
            raise ValidationError(self._error_message(response))
        if response.status_code == 404:
            raise NotFoundError(self._error_message(response))
        if response.is_error:
            logger.error("%s %s -> %s", method, url, response.status_code)
            raise StorageError(self._error_message(response))
        return response

    def _json(self, method: str, path: str, **kwargs) -> Any:
        return self._request(method, path, **kwargs).json()

    # ---------- Players ----------

    def list_players(self) -> List[Dict[str, Any]]:
        return self._json("GET", "/players")

    def add_player(self, name: str, jersey_number: int) -> Dict[str, Any]:
        return self._json("POST", "/players", json={"name": name, "jersey_number": jersey_number})

    def update_player(self, player_id: int, name: str, jersey_number: int) -> Dict[str, Any]:
        return self._json(
            "PUT", f"/players/{player_id}", json={"name": name, "jersey_number": jersey_number}
        )

    def delete_player(self, player_id: int) -> Dict[str, Any]:
        return self._json("DELETE", f"/players/{player_id}")

    # ---------- Sessions ----------

    def create_session(self, name: str) -> Dict[str, Any]:
        return self._json("POST", "/sessions", json={"name": name})

    def get_session(self, session_id: int) -> Dict[str, Any]:
        return self._json("GET", f"/sessions/{session_id}")

    # ---------- Pass stats ----------

    def add_pass(self, session_id: int, player_id: int, rating: int) -> Dict[str, Any]:
        return self._json(
            "POST",
            "/pass_stats",
            json={"session_id": session_id, "player_id": player_id, "rating": rating},
        )

    def session_stats(self, session_id: int) -> List[Dict[str, Any]]:
        return self._json("GET", f"/session/{session_id}/stats")

    def player_stats(self, session_id: int, player_id: int) -> Dict[str, Any]:
        return self._json("GET", f"/session/{session_id}/player/{player_id}/stats")

    def undo_last_pass(self, session_id: int, player_id: int) -> Dict[str, Any]:
        return self._json("DELETE", f"/session/{session_id}/player/{player_id}/last_pass")

    def export(self, session_id: int, fmt: str) -> bytes:
        return self._request("GET", f"/session/{session_id}/export", params={"format": fmt}).content
