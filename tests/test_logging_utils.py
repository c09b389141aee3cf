import logging

import pytest

from playlist_viewer.core import log_error, log_info, log_step, log_warning


@pytest.mark.parametrize(
    "helper, level, prefix",
    [
        (log_info, logging.INFO, ""),
        (log_step, logging.INFO, "→ "),
        (log_warning, logging.WARNING, "⚠️ "),
        (log_error, logging.ERROR, "❌ "),
    ],
)
def test_helpers_log_through_project_logger(caplog, helper, level, prefix) -> None:
    caplog.set_level(logging.DEBUG, logger="playlist_viewer")

    helper("Exchanging authorization code...")

    record = caplog.records[-1]
    assert record.name == "playlist_viewer"
    assert record.levelno == level
    assert record.getMessage() == f"{prefix}Exchanging authorization code..."
