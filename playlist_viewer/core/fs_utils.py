"""File helpers behind JsonFileSessionStore, which keeps the Spotify token pair
in a small JSON document between CLI runs.
"""

import json
import os
from pathlib import Path
import tempfile
from typing import Any, Callable, Optional


def ensure_parent_dir(path: Path | str) -> None:
    """
    Create the directory that will hold the session file, if missing.
    Example:
      ensure_parent_dir("~/.playlist_viewer/session.json")
    """
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def write_json(path: str | Path, data: Any) -> None:
    """
    Save the session document with an atomic replace.

    Tokens go to a temporary file beside the session file, are fsynced, then
    os.replace moves them over it. A crash mid-save leaves the previous
    token pair readable instead of a truncated file.
    """
    target_path = Path(path)
    ensure_parent_dir(target_path)

    fd, tmp_path_str = tempfile.mkstemp(
        dir=str(target_path.parent),
        prefix=target_path.name,
        suffix=".tmp",
    )
    tmp_path = Path(tmp_path_str)

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp_path, target_path)
    except Exception:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            pass
        raise


def read_json(
    path: str | Path,
    default: Any = None,
    *,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> Any:
    """
    Load the session document.

    A missing file means nobody has logged in yet, and a corrupt one is
    treated the same way after on_error is told about it. Both return
    `default`.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return default
    except json.JSONDecodeError as e:
        if on_error:
            on_error(e)
        return default


def remove_file(path: str | Path) -> None:
    """Forget the stored session on logout. A missing file is fine."""
    Path(path).unlink(missing_ok=True)
