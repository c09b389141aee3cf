"""Client session state machine.

    LOGGED_OUT --(code in URL)--> AWAITING_CODE_EXCHANGE --(ok)--> LOGGED_IN
        ^                                  |                           |
        +-----------(failure)--------------+                           |
        +--------------------------(logout)----------------------------+

Only one request runs at a time per controller. logout() bumps a generation
counter; a request started before the bump has its result discarded.
"""

import threading
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import parse_qs, parse_qsl, urlencode, urlparse, urlunparse

from playlist_viewer.config import load_public_login_config
from playlist_viewer.core import TokenPair, log_info, log_step, log_success, log_warning
from playlist_viewer.spotify.auth import build_authorize_url

from .proxy_client import ProxyClient, ProxyError
from .store import SessionStore

# Query parameters of the login redirect, removed once consumed
REDIRECT_PARAMS = ("code", "state", "error")


class SessionState(str, Enum):
    LOGGED_OUT = "logged_out"
    AWAITING_CODE_EXCHANGE = "awaiting_code_exchange"
    LOGGED_IN = "logged_in"


def get_code_from_url(url: str, param: str = "code") -> Optional[str]:
    values = parse_qs(urlparse(url).query).get(param)
    return values[0] if values else None


def strip_code_from_url(url: str) -> str:
    """
    Remove the login redirect parameters from a URL, keeping everything else.

    Example:
      strip_code_from_url("http://localhost:8000/?code=abc&tab=2")
      -> "http://localhost:8000/?tab=2"
    """
    parsed = urlparse(url)
    kept = [
        (key, value)
        for key, value in parse_qsl(parsed.query, keep_blank_values=True)
        if key not in REDIRECT_PARAMS
    ]
    return urlunparse(parsed._replace(query=urlencode(kept)))


class SessionController:
    def __init__(
        self,
        store: SessionStore,
        proxy: ProxyClient,
        *,
        client_id: Optional[str] = None,
        redirect_uri: Optional[str] = None,
    ) -> None:
        self.store = store
        self.proxy = proxy
        self.client_id = client_id
        self.redirect_uri = redirect_uri

        self.state = SessionState.LOGGED_OUT
        self.tokens: Optional[TokenPair] = None
        self.playlists: Optional[List[Dict[str, Any]]] = None
        self.tracks: Optional[List[Dict[str, Any]]] = None
        self.error: Optional[str] = None
        self.is_loading = False

        self._in_flight = threading.Lock()
        self._generation = 0

    # ---- Transitions --------------------------------------------------------

    def on_load(self, current_url: str) -> str:
        """
        Resume a stored session, or consume an authorization code in the URL.

        Returns the URL without the redirect parameters. The caller should
        replace its current URL with it whatever the outcome, so a consumed
        code is never exchanged twice.
        """
        clean_url = strip_code_from_url(current_url)

        stored = self.store.load()
        if stored is not None:
            log_info("Resuming stored Spotify session.")
            self.tokens = stored
            self.state = SessionState.LOGGED_IN
            self.load_playlists()
            return clean_url

        code = get_code_from_url(current_url)
        if not code:
            self.state = SessionState.LOGGED_OUT
            denied = get_code_from_url(current_url, "error")
            if denied:
                log_warning(f"Spotify authorization failed: {denied}")
                self.error = f"Spotify authorization failed: {denied}"
            return clean_url

        self.state = SessionState.AWAITING_CODE_EXCHANGE
        log_step("Exchanging authorization code...")
        if self._run(lambda: self.proxy.exchange_code(code), self._apply_token_response):
            log_success("Logged in to Spotify.")
            self.load_playlists()
        elif self.state == SessionState.AWAITING_CODE_EXCHANGE:
            self.state = SessionState.LOGGED_OUT
        return clean_url

    def login_url(self) -> str:
        """
        Spotify authorize URL to navigate to. This is a full page navigation,
        not an API call.
        """
        client_id, redirect_uri = self.client_id, self.redirect_uri
        if not client_id or not redirect_uri:
            client_id, redirect_uri = load_public_login_config()
        return build_authorize_url(client_id, redirect_uri)

    def logout(self) -> None:
        self._generation += 1
        self.store.clear()
        self.tokens = None
        self.state = SessionState.LOGGED_OUT
        self.error = None
        self.playlists = None
        self.tracks = None
        log_info("Logged out.")

    # ---- Fetches ------------------------------------------------------------

    def load_playlists(self) -> bool:
        if self.state != SessionState.LOGGED_IN or self.tokens is None:
            self.error = "Not logged in"
            return False
        access_token = self.tokens.access_token
        return self._run(
            lambda: self.proxy.fetch_user_playlists(access_token),
            self._apply_playlists,
        )

    def import_playlist(self, playlist_url: str) -> bool:
        self.tracks = None
        return self._run(
            lambda: self.proxy.fetch_playlist_tracks(playlist_url),
            self._apply_tracks,
        )

    def _run(self, call: Callable[[], Any], apply: Callable[[Any], None]) -> bool:
        """
        Run one request under the in-flight guard and apply its result.

        Returns True when the result was applied. A request refused because
        another one is pending, a failed request, and a request superseded by
        logout() all return False.
        """
        if not self._in_flight.acquire(blocking=False):
            log_warning("A request is already in flight; ignoring this one.")
            return False

        generation = self._generation
        self.is_loading = True
        self.error = None
        try:
            result = call()
        except ProxyError as e:
            if generation == self._generation:
                self.error = e.message
            return False
        finally:
            self.is_loading = False
            self._in_flight.release()

        if generation != self._generation:
            log_info("Discarding result of a superseded request.")
            return False
        apply(result)
        return True

    def _apply_token_response(self, data: Dict[str, Any]) -> None:
        tokens = TokenPair.from_token_response(data)
        self.store.save(tokens)
        self.tokens = tokens
        self.state = SessionState.LOGGED_IN

    def _apply_playlists(self, playlists: List[Dict[str, Any]]) -> None:
        self.playlists = playlists

    def _apply_tracks(self, tracks: List[Dict[str, Any]]) -> None:
        self.tracks = tracks
