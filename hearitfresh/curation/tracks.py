"""
Track aggregation across selected albums.

Albums are fetched in batches (Spotify accepts at most 20 ids per
get_albums call), strictly one batch after the other. Each batch is
filtered on its own: deduplication does not look across batches, so a
title repeated in two batches shows up twice in the result.
"""

from typing import Sequence

from hearitfresh.core.config import MAX_ALBUMS_PER_REQUEST
from hearitfresh.core.exceptions import CurationError, SpotifyError
from hearitfresh.core.logger import get_logger
from hearitfresh.curation.batching import split
from hearitfresh.curation.filters import filter_tracks
from hearitfresh.spotify.catalog import CatalogService
from hearitfresh.spotify.models import Track

logger = get_logger(__name__)


def aggregate_tracks(
    albums: Sequence[str],
    catalog: CatalogService,
    batch_size: int = MAX_ALBUMS_PER_REQUEST
) -> list[Track]:
    """
    Fetch and filter the tracks of the given albums.

    Args:
        albums: Album ids, in the order their tracks should appear.
        catalog: Catalog to query.
        batch_size: Album ids per get_albums request.

    Returns:
        Filtered tracks of every batch, concatenated in batch order.

    Raises:
        CurationError: If any batch fails. Tracks of earlier batches are
                       discarded, never returned partially.
    """
    tracks: list[Track] = []
    batches = split(albums, batch_size)

    for number, batch in enumerate(batches, start=1):
        try:
            album_data = catalog.get_albums(batch)
        except SpotifyError as e:
            raise CurationError(
                f"Track aggregation failed on batch {number}/{len(batches)}: {e.message}",
                details={"batch": number, "album_ids": list(batch)},
                cause=e
            ) from e

        batch_tracks = [
            Track.from_spotify_api(track_data, album.get("name", ""))
            for album in album_data
            for track_data in (album.get("tracks") or {}).get("items") or []
        ]
        kept = filter_tracks(batch_tracks)
        logger.debug(
            f"Batch {number}/{len(batches)}: kept {len(kept)} of {len(batch_tracks)} tracks"
        )
        tracks.extend(kept)

    return tracks
