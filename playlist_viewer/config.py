from dotenv import load_dotenv
import os

from playlist_viewer.core.errors import ConfigurationError
from playlist_viewer.core.models import Credentials

load_dotenv()

# Spotify API constants
SPOTIFY_AUTH_URL = "https://accounts.spotify.com/authorize"
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API_BASE = "https://api.spotify.com/v1"

SCOPES = [
    "playlist-read-private",
    "playlist-read-collaborative",
]

# Outbound request timeout, in seconds
SPOTIFY_HTTP_TIMEOUT = float(os.getenv("SPOTIFY_HTTP_TIMEOUT", "10"))

# Terminal front-end
API_BASE_URL = os.getenv("PLAYLIST_VIEWER_API_URL", "http://127.0.0.1:8000")
SESSION_FILE = os.getenv(
    "PLAYLIST_VIEWER_SESSION_FILE",
    os.path.join(os.path.expanduser("~"), ".playlist_viewer", "session.json"),
)

# Keys under which the token pair is persisted client-side
ACCESS_TOKEN_KEY = "spotify_access_token"
REFRESH_TOKEN_KEY = "spotify_refresh_token"


def load_credentials(require_redirect_uri: bool = False) -> Credentials:
    """
    Read the server-side Spotify credentials from the environment.

    The environment is read on every call so a misconfigured server reports
    the problem per request instead of failing at import time.
    """
    client_id = os.getenv("SPOTIFY_CLIENT_ID")
    client_secret = os.getenv("SPOTIFY_CLIENT_SECRET")
    redirect_uri = os.getenv("SPOTIFY_REDIRECT_URI")

    if require_redirect_uri:
        if not client_id or not client_secret or not redirect_uri:
            raise ConfigurationError("Spotify API credentials or redirect URI not set")
    elif not client_id or not client_secret:
        raise ConfigurationError("Spotify API credentials not set")

    return Credentials(
        client_id=client_id,
        client_secret=client_secret,
        redirect_uri=redirect_uri,
    )


def load_public_login_config() -> tuple[str, str]:
    """
    Client id and redirect URI used for the browser login redirect.

    These are public values; they fall back to the server-side pair when the
    dedicated public variables are not set.
    """
    client_id = os.getenv("SPOTIFY_PUBLIC_CLIENT_ID") or os.getenv("SPOTIFY_CLIENT_ID")
    redirect_uri = os.getenv("SPOTIFY_PUBLIC_REDIRECT_URI") or os.getenv(
        "SPOTIFY_REDIRECT_URI"
    )
    if not client_id or not redirect_uri:
        raise ConfigurationError("Spotify client id or redirect URI not set")
    return client_id, redirect_uri
