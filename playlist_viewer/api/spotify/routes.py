from typing import Optional

from fastapi import APIRouter, Header

from playlist_viewer.spotify import (
    fetch_playlist_tracks,
    fetch_user_playlists,
    parse_bearer_token,
)

from .schemas import PlaylistRequest, PlaylistsResponse, TracksResponse

router = APIRouter()


@router.post("/playlist", response_model=TracksResponse)
def import_playlist(body: PlaylistRequest) -> TracksResponse:
    """
    Tracks of a public playlist, given its share URL.

    Uses an app-level token, so no user login is needed.
    """
    tracks = fetch_playlist_tracks(body.playlist_url)
    return TracksResponse(tracks=tracks)


@router.get("/playlists", response_model=PlaylistsResponse, response_model_exclude_unset=True)
def get_user_playlists(
    authorization: Optional[str] = Header(default=None),
) -> PlaylistsResponse:
    """
    List the playlists of the user owning the bearer token.
    """
    access_token = parse_bearer_token(authorization)
    playlists = fetch_user_playlists(access_token)
    return PlaylistsResponse(playlists=playlists)
