"""
Data models for Spotify entities.

This module defines immutable dataclasses for the handful of Spotify
objects the curation pipeline passes around. Everything else in the
Spotify responses is dropped at the model boundary.

Design Decisions:
    - All dataclasses are frozen (immutable); identifiers are only ever
      filtered in or out, never modified
    - Records live for one pipeline run; nothing is persisted
    - Factories named from_spotify_api() build models from raw API dicts

Usage:
    from hearitfresh.spotify.models import Album, Track

    album = Album.from_spotify_api(album_data)
    tracks = [Track.from_spotify_api(t, album.name) for t in album_data["tracks"]["items"]]
"""

from dataclasses import dataclass, field
from typing import Any


# Title of every playlist created by the assembler
PLAYLIST_TITLE = "PlayList Generated By HearItFresh"

# Album quota used when a batch run holds exactly this many artists
FULL_BATCH_ARTISTS = 20
FULL_BATCH_QUOTA = 5

# Rough total album budget split across the artists of a run
ALBUM_BUDGET = 100


@dataclass(frozen=True)
class Artist:
    """
    A Spotify artist as returned by search or top-artists.

    Attributes:
        id: Spotify artist ID.
        name: Display name.
    """
    id: str
    name: str

    @classmethod
    def from_spotify_api(cls, artist_data: dict[str, Any]) -> "Artist":
        return cls(id=artist_data["id"], name=artist_data.get("name", ""))


@dataclass(frozen=True)
class Album:
    """
    An album candidate during selection.

    Attributes:
        id: Spotify album ID. This is what selection returns.
        name: Album title, only used for keyword filtering and then dropped.
    """
    id: str
    name: str

    @classmethod
    def from_spotify_api(cls, album_data: dict[str, Any]) -> "Album":
        return cls(id=album_data["id"], name=album_data.get("name", ""))


@dataclass(frozen=True)
class Track:
    """
    A track candidate for the playlist.

    Identity for deduplication is `name`, not `uri`: two recordings with
    the same title count as duplicates.

    Attributes:
        name: Track title as it appears on Spotify.
        album_name: Title of the album the track was fetched from.
        uri: Spotify track URI, e.g. "spotify:track:4cOdK2wGLETKBW3PvgPWqT".
    """
    name: str
    album_name: str
    uri: str

    @classmethod
    def from_spotify_api(cls, track_data: dict[str, Any], album_name: str) -> "Track":
        """
        Create a Track from a simplified track object of an album response.

        Args:
            track_data: One entry of album["tracks"]["items"].
            album_name: Name of the album the track belongs to.
        """
        return cls(
            name=track_data.get("name", ""),
            album_name=album_name,
            uri=track_data["uri"],
        )


@dataclass(frozen=True)
class PlaylistDetails:
    """
    A freshly created playlist.

    Only `id` is used for later mutations; `link` and `name` are for display.

    Attributes:
        id: The playlist URI returned by Spotify ("spotify:playlist:...").
        link: Public open.spotify.com URL.
        name: Playlist title.
    """
    id: str
    link: str
    name: str

    @classmethod
    def from_spotify_api(cls, playlist_data: dict[str, Any]) -> "PlaylistDetails":
        return cls(
            id=playlist_data["uri"],
            link=playlist_data.get("external_urls", {}).get("spotify", ""),
            name=playlist_data.get("name", PLAYLIST_TITLE),
        )


def album_quota(total_artists: int) -> int:
    """
    Number of albums to keep per artist for a run over `total_artists` artists.

    Raises:
        ValueError: If total_artists is not positive.
    """
    if total_artists <= 0:
        raise ValueError(f"total_artists must be positive, got {total_artists}")
    if total_artists == FULL_BATCH_ARTISTS:
        return FULL_BATCH_QUOTA
    return ALBUM_BUDGET // (total_artists * 2)


@dataclass(frozen=True)
class ArtistQuery:
    """
    One artist of a batch run.

    Attributes:
        name: Artist name as typed by the caller.
        total_artists_in_batch: How many artists the run holds; drives the quota.
    """
    name: str
    total_artists_in_batch: int

    @property
    def quota(self) -> int:
        return album_quota(self.total_artists_in_batch)


@dataclass(frozen=True)
class CurationResult:
    """
    Outcome of a full pipeline run.

    Attributes:
        playlist: The created playlist.
        tracks: Tracks added to it, in playlist order.
        skipped_artists: Artists whose album selection failed, in input order.
    """
    playlist: PlaylistDetails
    tracks: tuple[Track, ...] = field(default_factory=tuple)
    skipped_artists: tuple[str, ...] = field(default_factory=tuple)

    @property
    def track_count(self) -> int:
        return len(self.tracks)
