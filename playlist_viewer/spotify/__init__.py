"""Public façade for the playlist_viewer.spotify package.

This module exposes the Spotify integration: token exchange, playlist
retrieval and the pure view-model mapping. Callers should import these
symbols from this façade instead of the internal auth, playlists or views
modules.
"""

from .auth import (
    AUTHORIZATION_CODE,
    CLIENT_CREDENTIALS,
    build_authorize_url,
    build_basic_auth_header,
    exchange_authorization_code,
    exchange_token,
    request_client_credentials_token,
)
from .playlists import (
    extract_playlist_id,
    fetch_playlist_tracks,
    fetch_user_playlists,
    parse_bearer_token,
)
from .views import (
    first_image_url,
    to_playlist_summaries,
    to_playlist_summary,
    to_track_view,
    to_track_views,
)

__all__ = [
    "AUTHORIZATION_CODE",
    "CLIENT_CREDENTIALS",
    "build_authorize_url",
    "build_basic_auth_header",
    "exchange_token",
    "exchange_authorization_code",
    "request_client_credentials_token",
    "extract_playlist_id",
    "parse_bearer_token",
    "fetch_playlist_tracks",
    "fetch_user_playlists",
    "first_image_url",
    "to_track_view",
    "to_track_views",
    "to_playlist_summary",
    "to_playlist_summaries",
]
