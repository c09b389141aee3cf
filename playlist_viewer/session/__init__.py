"""Public façade for the playlist_viewer.session package.

Client-side session handling: the login state machine, the token store it
persists to, and the HTTP client it uses to reach the proxy endpoints.
"""

from .controller import (
    SessionController,
    SessionState,
    get_code_from_url,
    strip_code_from_url,
)
from .proxy_client import ProxyClient, ProxyError
from .store import InMemorySessionStore, JsonFileSessionStore, SessionStore

__all__ = [
    "SessionController",
    "SessionState",
    "get_code_from_url",
    "strip_code_from_url",
    "ProxyClient",
    "ProxyError",
    "SessionStore",
    "InMemorySessionStore",
    "JsonFileSessionStore",
]
