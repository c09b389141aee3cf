"""Pure mapping from Spotify resources to the view models served to the UI.

No I/O here, so these functions are unit-testable without any HTTP mocking.
"""

from typing import Any, Dict, Iterable, List, Optional

from playlist_viewer.core import TrackView


def first_image_url(images: Optional[List[Dict[str, Any]]]) -> Optional[str]:
    if not images:
        return None
    return images[0].get("url")


def to_track_view(track: Dict[str, Any]) -> TrackView:
    """
    Reshape a Spotify track object into a TrackView.

    Artist names are joined with ", "; the album cover is the first album
    image, or None when the album has no images.
    """
    album = track.get("album") or {}
    return TrackView(
        name=track.get("name") or "",
        artists=", ".join(a["name"] for a in track.get("artists") or [] if a.get("name")),
        album_cover=first_image_url(album.get("images")),
    )


def to_track_views(items: Iterable[Dict[str, Any]]) -> List[TrackView]:
    """
    Map playlist track items ({"track": {...}, "added_at": ...}) to TrackViews.

    Items whose track is null (removed or unavailable tracks) are skipped.
    """
    return [to_track_view(item["track"]) for item in items if item.get("track")]


def to_playlist_summary(item: Dict[str, Any]) -> Dict[str, Any]:
    # Passed through untouched; images and tracks.total stay as Spotify sent them.
    return dict(item)


def to_playlist_summaries(items: Iterable[Optional[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    """
    Pass playlists through, dropping null entries Spotify sometimes returns
    in /me/playlists items.
    """
    return [to_playlist_summary(item) for item in items if item]
