"""Persistence of the client-side token pair.

A SessionStore is handed to the SessionController instead of letting it read
and write storage directly, so tests can run against InMemorySessionStore.
"""

from pathlib import Path
from typing import Optional, Protocol

from playlist_viewer.config import ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY
from playlist_viewer.core import TokenPair, log_warning, read_json, remove_file, write_json


class SessionStore(Protocol):
    def load(self) -> Optional[TokenPair]: ...

    def save(self, tokens: TokenPair) -> None: ...

    def clear(self) -> None: ...


class InMemorySessionStore:
    def __init__(self, tokens: Optional[TokenPair] = None) -> None:
        self._tokens = tokens

    def load(self) -> Optional[TokenPair]:
        return self._tokens

    def save(self, tokens: TokenPair) -> None:
        self._tokens = tokens

    def clear(self) -> None:
        self._tokens = None


class JsonFileSessionStore:
    """
    Token pair stored in a small JSON file:

      {"spotify_access_token": "...", "spotify_refresh_token": "..."}

    The refresh key is omitted when no refresh token was issued.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> Optional[TokenPair]:
        def _on_error(e: Exception) -> None:
            log_warning(f"Session file {self.path} is corrupted; ignoring it.")

        data = read_json(self.path, default=None, on_error=_on_error)
        if not isinstance(data, dict) or not data.get(ACCESS_TOKEN_KEY):
            return None
        return TokenPair(
            access_token=data[ACCESS_TOKEN_KEY],
            refresh_token=data.get(REFRESH_TOKEN_KEY),
        )

    def save(self, tokens: TokenPair) -> None:
        payload = {ACCESS_TOKEN_KEY: tokens.access_token}
        if tokens.refresh_token is not None:
            payload[REFRESH_TOKEN_KEY] = tokens.refresh_token
        write_json(self.path, payload)

    def clear(self) -> None:
        remove_file(self.path)
