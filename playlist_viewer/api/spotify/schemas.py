from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from playlist_viewer.core import PlaylistSummary, TrackView


class PlaylistRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    playlist_url: Optional[str] = Field(default=None, alias="playlistUrl")


class TracksResponse(BaseModel):
    tracks: List[TrackView]


class PlaylistsResponse(BaseModel):
    playlists: List[PlaylistSummary]
