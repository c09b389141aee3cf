"""
Token exchange against the Spotify accounts service.
- Authorization-code grant: turns the code from the login redirect into an
  access token plus a refresh token.
- Client-credentials grant: app-level access token for public resources.
- Builds the authorize URL the browser is sent to for login.

Every call performs a fresh exchange. Nothing is cached and nothing is retried.
"""

import base64
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from playlist_viewer.config import (
    SCOPES,
    SPOTIFY_AUTH_URL,
    SPOTIFY_TOKEN_URL,
    load_credentials,
)
from playlist_viewer.core import (
    ConfigurationError,
    Credentials,
    UpstreamAuthError,
    ValidationError,
    log_error,
    log_step,
    log_success,
)

from .client import error_body, sp_post_form

AUTHORIZATION_CODE = "authorization_code"
CLIENT_CREDENTIALS = "client_credentials"

_FAILURE_MESSAGES = {
    AUTHORIZATION_CODE: "Failed to exchange code for tokens",
    CLIENT_CREDENTIALS: "Failed to authenticate with Spotify",
}


def _is_complete(credentials: Credentials, require_redirect_uri: bool = False) -> bool:
    if not credentials.client_id or not credentials.client_secret:
        return False
    return bool(credentials.redirect_uri) or not require_redirect_uri


def build_basic_auth_header(credentials: Credentials) -> str:
    raw = f"{credentials.client_id}:{credentials.client_secret}".encode()
    return f"Basic {base64.b64encode(raw).decode()}"


def exchange_token(
    grant_type: str,
    *,
    code: Optional[str] = None,
    credentials: Optional[Credentials] = None,
) -> Dict[str, Any]:
    """
    Exchange a grant for tokens. Returns the upstream JSON verbatim.

    Input is checked before configuration, and both before any network call:
    a missing code raises ValidationError, missing credentials raise
    ConfigurationError. A non-2xx answer raises UpstreamAuthError carrying
    Spotify's status and body.
    """
    if grant_type == AUTHORIZATION_CODE:
        if not code:
            raise ValidationError("Authorization code is missing")
        if credentials is None:
            credentials = load_credentials(require_redirect_uri=True)
        elif not _is_complete(credentials, require_redirect_uri=True):
            raise ConfigurationError("Spotify API credentials or redirect URI not set")
        payload = {
            "grant_type": AUTHORIZATION_CODE,
            "code": code,
            "redirect_uri": credentials.redirect_uri,
        }
    elif grant_type == CLIENT_CREDENTIALS:
        if credentials is None:
            credentials = load_credentials()
        elif not _is_complete(credentials):
            raise ConfigurationError("Spotify API credentials not set")
        payload = {"grant_type": CLIENT_CREDENTIALS}
    else:
        raise ValidationError(f"Unsupported grant type: {grant_type}")

    headers = {
        "Authorization": build_basic_auth_header(credentials),
        "Content-Type": "application/x-www-form-urlencoded",
    }

    log_step(f"Requesting Spotify token ({grant_type})...")
    r = sp_post_form(SPOTIFY_TOKEN_URL, data=payload, headers=headers)
    if not 200 <= r.status_code < 300:
        details = error_body(r)
        log_error(f"Spotify token exchange error ({r.status_code}): {details}")
        raise UpstreamAuthError(
            _FAILURE_MESSAGES[grant_type],
            status_code=r.status_code,
            details=details,
        )

    log_success(f"Spotify token issued ({grant_type}).")
    return r.json()


def exchange_authorization_code(code: Optional[str]) -> Dict[str, Any]:
    return exchange_token(AUTHORIZATION_CODE, code=code)


def request_client_credentials_token() -> str:
    """Fetch an app-level access token and return just the token string."""
    return exchange_token(CLIENT_CREDENTIALS)["access_token"]


def build_authorize_url(
    client_id: str,
    redirect_uri: str,
    *,
    scopes: Optional[List[str]] = None,
    state: Optional[str] = None,
) -> str:
    params = {
        "client_id": client_id,
        "response_type": "code",
        "redirect_uri": redirect_uri,
        "scope": " ".join(scopes if scopes is not None else SCOPES),
    }
    if state:
        params["state"] = state
    return f"{SPOTIFY_AUTH_URL}?{urlencode(params)}"
