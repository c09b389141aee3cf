from fastapi import FastAPI

from playlist_viewer.api.auth.routes import router as auth_router
from playlist_viewer.api.errors import register_error_handlers
from playlist_viewer.api.health import router as health_router
from playlist_viewer.api.spotify.routes import router as spotify_router
from playlist_viewer.api.ui import router as ui_router
from playlist_viewer.core import configure_logging

configure_logging()

app = FastAPI(
    title="Spotify Playlist Viewer",
    version="0.1.0",
    description="Thin proxy over the Spotify Web API for browsing playlists.",
)

register_error_handlers(app)

app.include_router(ui_router, tags=["ui"])
app.include_router(health_router, tags=["health"])
app.include_router(auth_router, tags=["auth"])
app.include_router(spotify_router, tags=["spotify"])
