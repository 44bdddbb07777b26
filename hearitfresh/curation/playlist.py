"""
Playlist assembly: creating the playlist and changing its contents.

PlaylistAssembler.add_tracks() sends exactly one request. It does not
re-batch, so callers must keep each call within Spotify's 100 tracks
per request (see curation.pipeline, which uses batching.split).
"""

from typing import Any, Sequence

from hearitfresh.core.exceptions import AssemblyError, SpotifyError
from hearitfresh.core.logger import get_logger
from hearitfresh.spotify.catalog import CatalogService
from hearitfresh.spotify.models import PLAYLIST_TITLE, PlaylistDetails

logger = get_logger(__name__)

DESCRIPTIONS = {
    "new": "Listen To Something New From {artists}",
    "old": "Listen to songs from your favourite artists {artists}",
}


def playlist_description(artists_label: str, mode: str) -> str:
    """
    Description text for a playlist built from `artists_label`.

    Raises:
        ValueError: If mode is neither "new" nor "old".
    """
    try:
        template = DESCRIPTIONS[mode]
    except KeyError:
        raise ValueError(f"mode must be 'new' or 'old', got {mode!r}") from None
    return template.format(artists=artists_label)


class PlaylistAssembler:
    """
    Creates playlists and adds/removes their tracks through a catalog.

    Attributes:
        _catalog: Catalog used for every call.

    Example:
        assembler = PlaylistAssembler(catalog)
        playlist = assembler.create_playlist("The Beatles, Queen", "new")
        assembler.add_tracks(playlist.id, uris[:100])
    """

    def __init__(self, catalog: CatalogService) -> None:
        self._catalog = catalog

    def create_playlist(self, artists_label: str, mode: str) -> PlaylistDetails:
        """
        Create a public playlist titled PLAYLIST_TITLE.

        Args:
            artists_label: Artist names as shown in the description.
            mode: "new" (discover) or "old" (favourites).

        Returns:
            PlaylistDetails of the created playlist.

        Raises:
            ValueError: If mode is invalid.
            AssemblyError: If the catalog call fails.
        """
        description = playlist_description(artists_label, mode)

        try:
            playlist_data = self._catalog.create_playlist(
                PLAYLIST_TITLE, description=description, public=True
            )
        except SpotifyError as e:
            raise AssemblyError(
                f"Failed to create playlist: {e.message}",
                details={"description": description},
                cause=e
            ) from e

        playlist = PlaylistDetails.from_spotify_api(playlist_data)
        logger.info(f"Created playlist {playlist.name}: {playlist.link}")
        return playlist

    def add_tracks(self, playlist_id: str, track_uris: Sequence[str]) -> dict[str, Any]:
        """
        Add tracks to a playlist in a single request.

        Args:
            playlist_id: PlaylistDetails.id of the target playlist.
            track_uris: At most 100 uris; not re-batched here.

        Returns:
            The catalog acknowledgement ({snapshot_id}).

        Raises:
            AssemblyError: If the catalog call fails.
        """
        try:
            return self._catalog.add_tracks_to_playlist(playlist_id, list(track_uris))
        except SpotifyError as e:
            raise AssemblyError(
                f"Failed to add {len(track_uris)} tracks to playlist: {e.message}",
                details={"playlist_id": playlist_id, "batch_size": len(track_uris)},
                cause=e
            ) from e

    def remove_tracks(
        self, playlist_id: str, tracks: Sequence[dict[str, str]]
    ) -> bool:
        """
        Best-effort removal of tracks from a playlist.

        Args:
            playlist_id: Playlist to clean up.
            tracks: Items of the form {"uri": "spotify:track:..."}.

        Returns:
            True on success. False if the catalog rejected the call; the
            cause is logged and never raised.
        """
        try:
            self._catalog.remove_tracks_from_playlist(playlist_id, list(tracks))
        except SpotifyError as e:
            logger.error(
                f"Failed to remove {len(tracks)} tracks from playlist {playlist_id}: {e}"
            )
            return False
        return True

    def playlist_tracks(self, playlist_id: str) -> list[dict[str, Any]]:
        """
        Current track items of a playlist (first page, up to 100).

        Raises:
            AssemblyError: If the catalog call fails.
        """
        try:
            return self._catalog.get_playlist_tracks(playlist_id)
        except SpotifyError as e:
            raise AssemblyError(
                f"Failed to read playlist tracks: {e.message}",
                details={"playlist_id": playlist_id},
                cause=e
            ) from e
