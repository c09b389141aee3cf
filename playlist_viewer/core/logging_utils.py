"""Log helpers shared by the proxy endpoints, the Spotify client and the
session controller. Everything goes through the "playlist_viewer" logger.
"""

import logging

# Level and handlers are set by logging_config.configure_logging
logger = logging.getLogger("playlist_viewer")


def log_info(message: str) -> None:
    """
    Session bookkeeping, e.g. a resumed login or a discarded stale result.
    """
    logger.info("%s", message)


def log_step(message: str) -> None:
    """
    A Spotify call about to be made (token exchange, playlist fetch).
    """
    logger.info("→ %s", message)


def log_success(message: str) -> None:
    """
    A login or fetch that completed.
    """
    logger.info("✅ %s", message)


def log_warning(message: str) -> None:
    """
    Recoverable trouble: unreachable proxy, corrupt session file, refused
    concurrent request.
    """
    logger.warning("⚠️ %s", message)


def log_error(message: str) -> None:
    """
    A failed request, or a CLI command that cannot go on.
    """
    logger.error("❌ %s", message)
