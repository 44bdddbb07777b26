"""
Catalog service interface.

The curation components never reach for a global client: each of them
receives an object implementing CatalogService. SpotifyCatalog is the
production implementation; tests pass a Mock built with spec=CatalogService.

All methods return raw Spotify Web API objects (dicts) and raise
SpotifyError on failure. None of them retry.
"""

from typing import Any, Protocol, Sequence


class CatalogService(Protocol):
    """Remote music catalog used by the curation pipeline."""

    def search_artist(
        self, name: str, limit: int = 1, offset: int = 0
    ) -> list[dict[str, Any]]:
        """Artist objects ({id, name, ...}) best match first."""
        ...

    def get_artist_albums(
        self,
        artist_id: str,
        limit: int = 10,
        album_type: str = "album",
        include_groups: str = "album",
    ) -> list[dict[str, Any]]:
        """Simplified album objects ({id, name, ...}) of an artist."""
        ...

    def get_albums(self, album_ids: Sequence[str]) -> list[dict[str, Any]]:
        """Full album objects, each with tracks.items. At most 20 ids."""
        ...

    def get_user_top_artists(self, limit: int = 10) -> list[dict[str, Any]]:
        """The current user's top artists."""
        ...

    def create_playlist(
        self, name: str, description: str = "", public: bool = True
    ) -> dict[str, Any]:
        """Create a playlist for the current user; returns the playlist object."""
        ...

    def add_tracks_to_playlist(
        self, playlist_id: str, uris: Sequence[str]
    ) -> dict[str, Any]:
        """Append track uris (at most 100). Returns {snapshot_id}."""
        ...

    def remove_tracks_from_playlist(
        self, playlist_id: str, tracks: Sequence[dict[str, str]]
    ) -> dict[str, Any]:
        """Remove all occurrences of the given {uri} items. Returns {snapshot_id}."""
        ...

    def get_playlist_tracks(self, playlist_id: str) -> list[dict[str, Any]]:
        """Playlist track items (first page)."""
        ...
