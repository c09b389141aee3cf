import logging
import os
import sys


def configure_logging(level: int | str | None = None) -> None:
    """
    Configure root logging for the API server and the CLI.

    - Logs go to stdout, next to uvicorn's access log
    - Format: time, level, logger name, message
    - Level comes from the argument, then LOG_LEVEL, then INFO
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()

    root = logging.getLogger()

    # uvicorn installs its own handlers first when serving the API
    if root.handlers:
        root.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root.addHandler(handler)
    root.setLevel(level)
