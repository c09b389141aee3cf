from typing import Any, Callable, Dict, List, Optional

from playlist_viewer.core import TokenPair
from playlist_viewer.session import (
    InMemorySessionStore,
    ProxyError,
    SessionController,
    SessionState,
    get_code_from_url,
    strip_code_from_url,
)

PLAYLISTS = [{"id": "p1", "name": "Road trip", "tracks": {"total": 3}}]
TRACKS = [{"name": "Song", "artists": "A, B", "albumCover": None}]


class FakeProxy:
    """
    Records calls and answers from canned values. A value that is an
    exception is raised instead of returned. `during_call` runs inside the
    call, before it returns, to simulate something happening meanwhile.
    """

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.token_response: Any = {"access_token": "at", "refresh_token": "rt"}
        self.playlists: Any = PLAYLISTS
        self.tracks: Any = TRACKS
        self.during_call: Optional[Callable[[], None]] = None

    def _answer(self, value: Any) -> Any:
        if self.during_call is not None:
            hook, self.during_call = self.during_call, None
            hook()
        if isinstance(value, Exception):
            raise value
        return value

    def exchange_code(self, code: str) -> Dict[str, Any]:
        self.calls.append(("exchange_code", code))
        return self._answer(self.token_response)

    def fetch_user_playlists(self, access_token: str) -> List[Dict[str, Any]]:
        self.calls.append(("fetch_user_playlists", access_token))
        return self._answer(self.playlists)

    def fetch_playlist_tracks(self, playlist_url: str) -> List[Dict[str, Any]]:
        self.calls.append(("fetch_playlist_tracks", playlist_url))
        return self._answer(self.tracks)


def _make_controller(store=None, proxy=None) -> SessionController:
    return SessionController(
        store if store is not None else InMemorySessionStore(),
        proxy if proxy is not None else FakeProxy(),
        client_id="public-id",
        redirect_uri="http://localhost:8000/",
    )


def test_strip_code_from_url_keeps_other_parameters() -> None:
    url = "http://localhost:8000/view?tab=2&code=abc&state=xyz"

    assert strip_code_from_url(url) == "http://localhost:8000/view?tab=2"


def test_strip_code_from_url_without_query_is_unchanged() -> None:
    assert strip_code_from_url("http://localhost:8000/") == "http://localhost:8000/"


def test_get_code_from_url() -> None:
    assert get_code_from_url("http://localhost:8000/?code=abc") == "abc"
    assert get_code_from_url("http://localhost:8000/") is None


def test_load_without_tokens_or_code_stays_logged_out() -> None:
    proxy = FakeProxy()
    controller = _make_controller(proxy=proxy)

    controller.on_load("http://localhost:8000/")

    assert controller.state == SessionState.LOGGED_OUT
    assert proxy.calls == []


def test_load_with_stored_tokens_logs_in_and_fetches_playlists() -> None:
    proxy = FakeProxy()
    store = InMemorySessionStore(TokenPair("stored-at", "stored-rt"))
    controller = _make_controller(store=store, proxy=proxy)

    controller.on_load("http://localhost:8000/")

    assert controller.state == SessionState.LOGGED_IN
    assert proxy.calls == [("fetch_user_playlists", "stored-at")]
    assert controller.playlists == PLAYLISTS
    assert controller.is_loading is False


def test_code_exchange_persists_tokens_and_fetches_playlists() -> None:
    proxy = FakeProxy()
    store = InMemorySessionStore()
    controller = _make_controller(store=store, proxy=proxy)

    clean_url = controller.on_load("http://localhost:8000/?code=abc")

    assert clean_url == "http://localhost:8000/"
    assert controller.state == SessionState.LOGGED_IN
    assert store.load() == TokenPair("at", "rt")
    assert proxy.calls == [("exchange_code", "abc"), ("fetch_user_playlists", "at")]
    assert controller.playlists == PLAYLISTS


def test_failed_code_exchange_logs_out_with_error_and_strips_code() -> None:
    proxy = FakeProxy()
    proxy.token_response = ProxyError(400, "Failed to exchange code for tokens")
    store = InMemorySessionStore()
    controller = _make_controller(store=store, proxy=proxy)

    clean_url = controller.on_load("http://localhost:8000/?code=stale")

    assert clean_url == "http://localhost:8000/"
    assert controller.state == SessionState.LOGGED_OUT
    assert controller.error == "Failed to exchange code for tokens"
    assert controller.is_loading is False
    assert store.load() is None
    assert proxy.calls == [("exchange_code", "stale")]


def test_denied_authorization_surfaces_error_and_strips_it() -> None:
    proxy = FakeProxy()
    controller = _make_controller(proxy=proxy)

    clean_url = controller.on_load("http://localhost:8000/?error=access_denied&state=xyz")

    assert clean_url == "http://localhost:8000/"
    assert controller.state == SessionState.LOGGED_OUT
    assert controller.error == "Spotify authorization failed: access_denied"
    assert proxy.calls == []


def test_reloading_with_stripped_url_does_not_exchange_again() -> None:
    proxy = FakeProxy()
    proxy.token_response = ProxyError(400, "Failed to exchange code for tokens")
    controller = _make_controller(proxy=proxy)

    clean_url = controller.on_load("http://localhost:8000/?code=once")
    _make_controller(proxy=proxy).on_load(clean_url)

    assert proxy.calls == [("exchange_code", "once")]


def test_logout_clears_tokens_and_view_state() -> None:
    store = InMemorySessionStore(TokenPair("at", "rt"))
    controller = _make_controller(store=store)
    controller.on_load("http://localhost:8000/")
    controller.import_playlist("https://open.spotify.com/playlist/abc")
    controller.error = "stale error"

    controller.logout()

    assert controller.state == SessionState.LOGGED_OUT
    assert controller.tokens is None
    assert store.load() is None
    assert controller.playlists is None
    assert controller.tracks is None
    assert controller.error is None


def test_login_url_points_to_authorize_page() -> None:
    proxy = FakeProxy()
    controller = _make_controller(proxy=proxy)

    url = controller.login_url()

    assert url.startswith("https://accounts.spotify.com/authorize?")
    assert "client_id=public-id" in url
    assert "playlist-read-collaborative" in url
    assert proxy.calls == []


def test_import_playlist_sets_tracks() -> None:
    controller = _make_controller()

    assert controller.import_playlist("https://open.spotify.com/playlist/abc") is True
    assert controller.tracks == TRACKS
    assert controller.is_loading is False


def test_import_playlist_failure_surfaces_error_and_clears_loading() -> None:
    proxy = FakeProxy()
    proxy.tracks = ProxyError(400, "Invalid Spotify playlist URL")
    controller = _make_controller(proxy=proxy)

    assert controller.import_playlist("not-a-url") is False
    assert controller.error == "Invalid Spotify playlist URL"
    assert controller.tracks is None
    assert controller.is_loading is False


def test_load_playlists_requires_login() -> None:
    proxy = FakeProxy()
    controller = _make_controller(proxy=proxy)

    assert controller.load_playlists() is False
    assert controller.error == "Not logged in"
    assert proxy.calls == []


def test_result_of_request_superseded_by_logout_is_discarded() -> None:
    proxy = FakeProxy()
    controller = _make_controller(
        store=InMemorySessionStore(TokenPair("at", "rt")), proxy=proxy
    )
    controller.on_load("http://localhost:8000/")
    controller.playlists = None

    proxy.during_call = controller.logout
    applied = controller.import_playlist("https://open.spotify.com/playlist/abc")

    assert applied is False
    assert controller.tracks is None
    assert controller.state == SessionState.LOGGED_OUT


def test_second_request_while_one_is_pending_is_refused() -> None:
    proxy = FakeProxy()
    controller = _make_controller(proxy=proxy)
    nested_results: List[bool] = []

    proxy.during_call = lambda: nested_results.append(
        controller.import_playlist("https://open.spotify.com/playlist/other")
    )
    assert controller.import_playlist("https://open.spotify.com/playlist/abc") is True

    assert nested_results == [False]
    assert [c for c in proxy.calls if c[0] == "fetch_playlist_tracks"] == [
        ("fetch_playlist_tracks", "https://open.spotify.com/playlist/abc")
    ]
