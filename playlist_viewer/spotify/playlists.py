"""
Resource proxy for playlist data.
 - fetch_playlist_tracks: tracks of a public playlist, identified by its share URL,
   read with an app-level (client-credentials) token.
 - fetch_user_playlists: playlists of the user owning the bearer token.
"""

from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from playlist_viewer.core import (
    AuthenticationError,
    TrackView,
    UpstreamResourceError,
    ValidationError,
    log_error,
    log_info,
    log_step,
)

from .auth import request_client_credentials_token
from .client import error_body, sp_get
from .views import to_playlist_summaries, to_track_views

BEARER_PREFIX = "Bearer "


def extract_playlist_id(url: Optional[str]) -> Optional[str]:
    """
    Return the segment following "playlist" in the URL path, or None.

    Example:
      extract_playlist_id("https://open.spotify.com/playlist/37i9dQZF1?si=x")
      -> "37i9dQZF1"
    """
    if not url:
        return None
    try:
        parsed = urlparse(url)
    except ValueError:
        return None
    if not parsed.scheme or not parsed.netloc:
        return None

    segments = parsed.path.split("/")
    if "playlist" not in segments:
        return None
    index = segments.index("playlist")
    if index + 1 >= len(segments):
        return None
    return segments[index + 1] or None


def parse_bearer_token(authorization: Optional[str]) -> str:
    """
    Extract the token from an "Authorization: Bearer <token>" header value.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthenticationError("Authorization header missing or invalid")
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthenticationError("Authorization header missing or invalid")
    return token


def _get_json(access_token: str, path: str, failure_message: str) -> Dict[str, Any]:
    r = sp_get(access_token, path)
    if not 200 <= r.status_code < 300:
        details = error_body(r)
        log_error(f"Spotify {path} error ({r.status_code}): {details}")
        raise UpstreamResourceError(
            failure_message, status_code=r.status_code, details=details
        )
    return r.json()


def fetch_playlist_tracks(playlist_url: Optional[str]) -> List[TrackView]:
    """
    Tracks of the playlist behind `playlist_url`, as TrackViews.

    The URL is validated before anything goes on the wire. Only the first
    page returned by Spotify is used.
    """
    if not playlist_url:
        raise ValidationError("Playlist URL is required")

    playlist_id = extract_playlist_id(playlist_url)
    if not playlist_id:
        raise ValidationError("Invalid Spotify playlist URL")

    access_token = request_client_credentials_token()

    log_step(f"Fetching tracks of playlist {playlist_id}...")
    data = _get_json(
        access_token,
        f"playlists/{playlist_id}/tracks",
        "Failed to fetch playlist tracks",
    )
    tracks = to_track_views(data.get("items", []))
    log_info(f"Playlist {playlist_id}: {len(tracks)} tracks.")
    return tracks


def fetch_user_playlists(access_token: str) -> List[Dict[str, Any]]:
    """
    Playlists of the current user (first page of /me/playlists), passed through.
    """
    log_step("Fetching playlists of current user...")
    data = _get_json(access_token, "me/playlists", "Failed to fetch user playlists")
    playlists = to_playlist_summaries(data.get("items", []))
    log_info(f"Spotify playlists: {len(playlists)} playlists found.")
    return playlists
