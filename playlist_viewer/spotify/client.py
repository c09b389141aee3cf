"""
Client layer for Spotify HTTP calls.
 - Form POST for the accounts service and bearer GET for the Web API.
 - The only place that talks to `requests`; transport failures become TransportError.
"""

from typing import Any, Dict, Optional

import requests

from playlist_viewer.config import SPOTIFY_API_BASE, SPOTIFY_HTTP_TIMEOUT
from playlist_viewer.core import TransportError, log_error


def _to_url(path_or_url: str) -> str:
    return path_or_url if path_or_url.startswith("http") else f"{SPOTIFY_API_BASE}/{path_or_url.lstrip('/')}"


def sp_get(
    access_token: str,
    path_or_url: str,
    *,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = SPOTIFY_HTTP_TIMEOUT,
) -> requests.Response:
    url = _to_url(path_or_url)
    try:
        return requests.get(
            url,
            headers={"Authorization": f"Bearer {access_token}"},
            params=params or {},
            timeout=timeout,
        )
    except requests.RequestException as e:
        log_error(f"GET {url} failed: {e}")
        raise TransportError("Failed to reach Spotify", details=str(e)) from e


def sp_post_form(
    url: str,
    *,
    data: Dict[str, Any],
    headers: Dict[str, str],
    timeout: float = SPOTIFY_HTTP_TIMEOUT,
) -> requests.Response:
    try:
        return requests.post(url, data=data, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        log_error(f"POST {url} failed: {e}")
        raise TransportError("Failed to reach Spotify", details=str(e)) from e


def error_body(response: requests.Response) -> Any:
    """
    Body of a failed response, as JSON when possible, raw text otherwise.
    """
    try:
        return response.json()
    except ValueError:
        return response.text
