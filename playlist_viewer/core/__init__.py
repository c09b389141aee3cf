"""Public façade for the playlist_viewer.core package.

This module exposes logging helpers, filesystem utilities, the error taxonomy
and the base models that are safe to import from other packages. Callers
should import these cross-cutting concerns from this façade instead of the
internal submodules.
"""

from .errors import (
    AuthenticationError,
    ConfigurationError,
    PlaylistViewerError,
    TransportError,
    UpstreamAuthError,
    UpstreamError,
    UpstreamResourceError,
    ValidationError,
)
from .fs_utils import ensure_parent_dir, read_json, remove_file, write_json
from .logging_config import configure_logging
from .logging_utils import (
    log_error,
    log_info,
    log_step,
    log_success,
    log_warning,
)
from .models import Credentials, PlaylistSummary, TokenPair, TrackView

__all__ = [
    "configure_logging",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "ensure_parent_dir",
    "write_json",
    "read_json",
    "remove_file",
    "Credentials",
    "TokenPair",
    "TrackView",
    "PlaylistSummary",
    "PlaylistViewerError",
    "ValidationError",
    "ConfigurationError",
    "AuthenticationError",
    "UpstreamError",
    "UpstreamAuthError",
    "UpstreamResourceError",
    "TransportError",
]
