"""Error taxonomy shared by the services and the HTTP layer.

Every error carries the HTTP status it maps to and an optional `details`
payload. For upstream errors `details` is the body Spotify returned, forwarded
unmodified so callers can see exactly why the request was rejected.
"""

from typing import Any, Optional


class PlaylistViewerError(Exception):
    """Base class for all errors raised by playlist_viewer services."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details

    def to_payload(self) -> dict:
        payload: dict = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ValidationError(PlaylistViewerError):
    """Bad or missing input. No network call was attempted."""

    status_code = 400


class ConfigurationError(PlaylistViewerError):
    """Server-side configuration (credentials, redirect URI) is missing."""

    status_code = 500


class AuthenticationError(PlaylistViewerError):
    """Caller credentials (bearer token) are missing or malformed."""

    status_code = 401


class UpstreamError(PlaylistViewerError):
    """Spotify answered with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int, details: Any = None) -> None:
        super().__init__(message, status_code=status_code, details=details)


class UpstreamAuthError(UpstreamError):
    """The token endpoint rejected the exchange."""


class UpstreamResourceError(UpstreamError):
    """A Web API resource endpoint rejected the request."""


class TransportError(PlaylistViewerError):
    """Spotify could not be reached (DNS, connection, timeout...)."""

    status_code = 502
