"""
Spotify integration module for hearitfresh.

    - CatalogService: interface the curation pipeline depends on
    - SpotifyCatalog: spotipy-backed implementation
    - Artist, Album, Track, PlaylistDetails, ArtistQuery, CurationResult: data models

Usage:
    from hearitfresh.spotify import SpotifyCatalog

    catalog = SpotifyCatalog.connect(config.spotify)
"""

from hearitfresh.spotify.catalog import CatalogService
from hearitfresh.spotify.client import SpotifyCatalog
from hearitfresh.spotify.models import (
    Album,
    Artist,
    ArtistQuery,
    CurationResult,
    PlaylistDetails,
    Track,
    album_quota,
)

__all__ = [
    # Catalog
    "CatalogService",
    "SpotifyCatalog",
    # Models
    "Artist",
    "Album",
    "Track",
    "PlaylistDetails",
    "ArtistQuery",
    "CurationResult",
    "album_quota",
]
