"""
Remote Game Client

Thin HTTP client for the authoritative game service. Every call is a single
attempt bounded by a timeout; any transport problem is raised as
RemoteUnavailable so the reconciliation layer can fall back to local play.
"""

from typing import Any, Dict, Optional

import requests

from ..config.app_config import Config
from ..models.errors import RemoteUnavailable


class RemoteGameClient:
    """
    Client for the /wordle/game endpoints.

    Args:
        base_url: API root, e.g. http://127.0.0.1:5000/api
        timeout: Seconds to wait for connect and read on every call
        session: Optional requests.Session, mainly for connection reuse
    """

    def __init__(self,
                 base_url: str = Config.API_BASE_URL,
                 timeout: float = Config.REMOTE_TIMEOUT_SECONDS,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Content-Type': 'application/json'})

    def start_game(self) -> Dict[str, Any]:
        return self._request('POST', '/wordle/game')

    def submit_guess(self, game_id: str, guess: str) -> Dict[str, Any]:
        return self._request('POST', f'/wordle/game/{game_id}/guess', json={'guess': guess})

    def get_game_state(self, game_id: str) -> Dict[str, Any]:
        """Diagnostic snapshot of a remote game."""
        return self._request('GET', f'/wordle/game/{game_id}')

    def get_key_statuses(self, game_id: str) -> Dict[str, Any]:
        return self._request('GET', f'/wordle/game/{game_id}/key-statuses')

    def _request(self, method: str, path: str, json: Optional[Dict] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, json=json, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise RemoteUnavailable(f"{method} {url} failed: {e}") from e
        except ValueError as e:
            raise RemoteUnavailable(f"{method} {url} returned a non-JSON body") from e

        if not isinstance(data, dict):
            raise RemoteUnavailable(f"{method} {url} returned {type(data).__name__}, expected an object")
        if data.get('success') is False:
            raise RemoteUnavailable(f"{method} {url} reported failure: {data.get('error')}")
        return data
