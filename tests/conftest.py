"""Shared fixtures: a recording fake for Spotify's HTTP endpoints and
environment helpers for the server credentials."""

from typing import Any, Dict, List, Optional

import pytest
import requests

CREDENTIAL_VARS = ("SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET", "SPOTIFY_REDIRECT_URI")


class FakeResponse:
    def __init__(self, status_code: int, payload: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else str(payload)

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


class FakeSpotify:
    """
    Stands in for requests.get / requests.post.

    Responses are queued per method and served in order; every call is
    recorded in `calls` as (method, url, kwargs).
    """

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.responses: Dict[str, List[Any]] = {"POST": [], "GET": []}

    def reply(
        self, method: str, status_code: int, payload: Any = None, text: Optional[str] = None
    ) -> None:
        self.responses[method].append(FakeResponse(status_code, payload, text))

    def fail(self, method: str, error: Exception) -> None:
        self.responses[method].append(error)

    def _serve(self, method: str, url: str, kwargs: Dict[str, Any]) -> FakeResponse:
        self.calls.append((method, url, kwargs))
        if not self.responses[method]:
            raise AssertionError(f"Unexpected {method} {url}")
        response = self.responses[method].pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._serve("POST", url, kwargs)

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._serve("GET", url, kwargs)


@pytest.fixture
def fake_spotify(monkeypatch) -> FakeSpotify:
    fake = FakeSpotify()
    monkeypatch.setattr(requests, "post", fake.post)
    monkeypatch.setattr(requests, "get", fake.get)
    return fake


@pytest.fixture
def credentials_env(monkeypatch) -> None:
    monkeypatch.setenv("SPOTIFY_CLIENT_ID", "client-id")
    monkeypatch.setenv("SPOTIFY_CLIENT_SECRET", "client-secret")
    monkeypatch.setenv("SPOTIFY_REDIRECT_URI", "http://127.0.0.1:8000/")


@pytest.fixture
def no_credentials_env(monkeypatch) -> None:
    for name in CREDENTIAL_VARS + ("SPOTIFY_PUBLIC_CLIENT_ID", "SPOTIFY_PUBLIC_REDIRECT_URI"):
        monkeypatch.delenv(name, raising=False)
