"""
Terminal front-end for the playlist viewer.

Usage:
  playlist-viewer serve [--host HOST] [--port PORT]
  playlist-viewer login
  playlist-viewer callback <redirect-url>
  playlist-viewer playlists
  playlist-viewer import <playlist-url>
  playlist-viewer logout

Every command except `serve` talks to a running server (PLAYLIST_VIEWER_API_URL)
and keeps tokens in PLAYLIST_VIEWER_SESSION_FILE.
"""

import sys
import webbrowser
from typing import List, Optional

from playlist_viewer.config import API_BASE_URL, SESSION_FILE
from playlist_viewer.core import (
    configure_logging,
    log_error,
    log_info,
    log_step,
    log_success,
    log_warning,
)
from playlist_viewer.session import (
    JsonFileSessionStore,
    ProxyClient,
    SessionController,
    SessionState,
)


def build_controller() -> SessionController:
    return SessionController(
        JsonFileSessionStore(SESSION_FILE),
        ProxyClient(API_BASE_URL),
    )


def _option(args: List[str], name: str, default: str) -> str:
    if name in args:
        index = args.index(name)
        if index + 1 < len(args):
            return args[index + 1]
    return default


def _print_playlists(controller: SessionController) -> None:
    for p in controller.playlists or []:
        total = (p.get("tracks") or {}).get("total", 0)
        print(f"  {p.get('name')}  ({total} tracks)  [{p.get('id')}]")
    log_info(f"{len(controller.playlists or [])} playlists.")


def _print_tracks(controller: SessionController) -> None:
    for t in controller.tracks or []:
        print(f"  {t.get('name')} - {t.get('artists')}")
    log_info(f"{len(controller.tracks or [])} tracks imported.")


def _report(controller: SessionController, ok: bool) -> int:
    if not ok:
        log_error(controller.error or "Request failed.")
        return 1
    return 0


def cmd_serve(args: List[str]) -> int:
    import uvicorn

    host = _option(args, "--host", "127.0.0.1")
    port = int(_option(args, "--port", "8000"))
    uvicorn.run("playlist_viewer.api.fastapi_app:app", host=host, port=port)
    return 0


def cmd_login(controller: SessionController) -> int:
    url = controller.login_url()
    log_step("Opening browser for Spotify authorization...")
    log_info(
        "If your browser does not open automatically, copy/paste this URL manually:\n"
        f"{url}"
    )
    log_info("Then run: playlist-viewer callback <the URL you were redirected to>")
    try:
        webbrowser.open(url)
    except webbrowser.Error as e:
        log_warning(f"Could not open a browser ({e}).")
    return 0


def cmd_callback(controller: SessionController, redirect_url: str) -> int:
    controller.on_load(redirect_url)
    if controller.state != SessionState.LOGGED_IN:
        return _report(controller, False)
    log_success("Logged in.")
    if controller.error:
        return _report(controller, False)
    _print_playlists(controller)
    return 0


def cmd_playlists(controller: SessionController) -> int:
    controller.on_load("")
    if controller.state != SessionState.LOGGED_IN:
        log_error("Not logged in. Run: playlist-viewer login")
        return 1
    if controller.error:
        return _report(controller, False)
    _print_playlists(controller)
    return 0


def cmd_import(controller: SessionController, playlist_url: str) -> int:
    log_step(f"Importing {playlist_url}...")
    ok = controller.import_playlist(playlist_url)
    if ok:
        _print_tracks(controller)
    return _report(controller, ok)


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(__doc__)
        return 2

    command, rest = args[0], args[1:]
    if command == "serve":
        return cmd_serve(rest)

    controller = build_controller()
    if command == "login":
        return cmd_login(controller)
    if command == "callback" and rest:
        return cmd_callback(controller, rest[0])
    if command == "playlists":
        return cmd_playlists(controller)
    if command == "import" and rest:
        return cmd_import(controller, rest[0])
    if command == "logout":
        controller.logout()
        return 0

    print(__doc__)
    return 2


if __name__ == "__main__":
    sys.exit(main())
