from typing import Any, Dict, List, Optional

import requests

from playlist_viewer.config import API_BASE_URL, SPOTIFY_HTTP_TIMEOUT
from playlist_viewer.core import log_warning

CONNECTION_ERROR_MESSAGE = "Failed to connect to the server."


class ProxyError(Exception):
    """
    Failed call to the playlist viewer API.

    status_code is None when the server could not be reached at all.
    """

    def __init__(self, status_code: Optional[int], message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ProxyClient:
    """
    HTTP client for the proxy endpoints, used by the SessionController.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = SPOTIFY_HTTP_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _call(self, method: str, path: str, expect: str, **kwargs) -> Dict[str, Any]:
        """
        Perform one call and return its JSON body, which must hold `expect`.
        """
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            log_warning(f"{method} {path} failed: {e}")
            raise ProxyError(None, CONNECTION_ERROR_MESSAGE) from e

        try:
            data = resp.json()
        except ValueError:
            data = {}

        if resp.status_code >= 400:
            message = "An unknown error occurred"
            if isinstance(data, dict) and data.get("error"):
                message = data["error"]
            raise ProxyError(resp.status_code, message)

        if not isinstance(data, dict) or expect not in data:
            log_warning(f"{method} {path}: response has no '{expect}'")
            raise ProxyError(resp.status_code, "An unknown error occurred")

        return data

    def exchange_code(self, code: str) -> Dict[str, Any]:
        return self._call("POST", "/callback", "access_token", json={"code": code})

    def fetch_playlist_tracks(self, playlist_url: str) -> List[Dict[str, Any]]:
        return self._call("POST", "/playlist", "tracks", json={"playlistUrl": playlist_url})["tracks"]

    def fetch_user_playlists(self, access_token: str) -> List[Dict[str, Any]]:
        data = self._call(
            "GET",
            "/playlists",
            "playlists",
            headers={"Authorization": f"Bearer {access_token}"},
        )
        return data["playlists"]
