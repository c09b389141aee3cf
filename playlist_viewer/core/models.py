from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Credentials:
    """
    Spotify application credentials.

    The secret is excluded from repr so a Credentials instance can never end
    up in a log line.
    """

    client_id: str
    client_secret: str = field(repr=False)
    redirect_uri: Optional[str] = None


@dataclass(frozen=True)
class TokenPair:
    """
    Tokens obtained from an authorization-code exchange.

    refresh_token is None for grants that do not issue one.
    """

    access_token: str
    refresh_token: Optional[str] = None

    @classmethod
    def from_token_response(cls, data: Dict[str, Any]) -> "TokenPair":
        return cls(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token"),
        )


class TrackView(BaseModel):
    """
    Simplified track for display.

    - name        : track title
    - artists     : artist names joined with ", "
    - album_cover : url of the first album image (serialized as albumCover)
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    artists: str
    album_cover: Optional[str] = Field(default=None, alias="albumCover")


class PlaylistSummary(BaseModel):
    """
    A playlist from /me/playlists, passed through as Spotify returned it.

    No field is required; id, name, images, tracks and any other upstream
    fields are kept untouched.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    name: Optional[str] = None
    images: Optional[List[Dict[str, Any]]] = None
    tracks: Optional[Dict[str, Any]] = None
