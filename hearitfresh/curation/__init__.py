"""
Track curation and playlist assembly.

    - batching: split id lists to fit Spotify request limits
    - filters: keyword exclusion and name deduplication
    - albums: per-artist album selection
    - tracks: batched track aggregation
    - playlist: PlaylistAssembler (create / add / remove)
    - pipeline: curate_playlist() tying it all together

Usage:
    from hearitfresh.curation import curate_playlist

    result = curate_playlist(["The Beatles", "Queen"], catalog, mode="new")
    print(result.playlist.link)
"""

from hearitfresh.curation.albums import select_albums
from hearitfresh.curation.batching import split
from hearitfresh.curation.filters import (
    BLACKLISTED_WORDS,
    exclude_blacklisted,
    filter_tracks,
    is_blacklisted,
)
from hearitfresh.curation.pipeline import clear_playlist, curate_playlist, top_artist_names
from hearitfresh.curation.playlist import PlaylistAssembler, playlist_description
from hearitfresh.curation.tracks import aggregate_tracks

__all__ = [
    "split",
    "BLACKLISTED_WORDS",
    "is_blacklisted",
    "exclude_blacklisted",
    "filter_tracks",
    "select_albums",
    "aggregate_tracks",
    "PlaylistAssembler",
    "playlist_description",
    "curate_playlist",
    "top_artist_names",
    "clear_playlist",
]
