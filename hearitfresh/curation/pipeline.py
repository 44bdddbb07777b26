"""
End-to-end playlist curation.

Workflow:
    1. Select albums for every artist (failures are per artist)
    2. Union the album ids, first occurrence wins
    3. Aggregate and filter the tracks of those albums
    4. Create the playlist
    5. Add the tracks, at most track_batch_size per request

If track aggregation fails, no playlist is created. Once the playlist
exists, a failing addition raises AssemblyError; tracks added by earlier
batches stay in the playlist.
"""

from typing import Sequence

from tqdm import tqdm

from hearitfresh.core.config import MAX_ALBUMS_PER_REQUEST, MAX_TRACKS_PER_REQUEST
from hearitfresh.core.exceptions import CurationError, SpotifyError
from hearitfresh.core.logger import get_logger, log_skipped_artist
from hearitfresh.curation.albums import select_albums
from hearitfresh.curation.batching import split
from hearitfresh.curation.playlist import PlaylistAssembler, playlist_description
from hearitfresh.curation.tracks import aggregate_tracks
from hearitfresh.spotify.catalog import CatalogService
from hearitfresh.spotify.models import Artist, CurationResult

logger = get_logger(__name__)

TOP_ARTISTS_LIMIT = 10


def curate_playlist(
    artists: Sequence[str],
    catalog: CatalogService,
    mode: str = "new",
    *,
    album_batch_size: int = MAX_ALBUMS_PER_REQUEST,
    track_batch_size: int = MAX_TRACKS_PER_REQUEST,
    show_progress: bool = False
) -> CurationResult:
    """
    Build a new playlist from the albums of the given artists.

    Args:
        artists: Artist names. Their count sets the per-artist album quota.
        catalog: Catalog used for every call.
        mode: "new" or "old", selects the playlist description.
        album_batch_size: Album ids per get_albums request.
        track_batch_size: Track uris per playlist addition request.
        show_progress: Show a tqdm bar while selecting albums.

    Returns:
        CurationResult with the playlist, the added tracks and the
        artists that had to be skipped.

    Raises:
        ValueError: If artists is empty or mode is invalid.
        CurationError: If track aggregation fails (no playlist is created).
        AssemblyError: If the playlist cannot be created or filled.
    """
    if not artists:
        raise ValueError("At least one artist is required")
    # Reject an unknown mode before any catalog call
    playlist_description(", ".join(artists), mode)

    album_ids: list[str] = []
    seen_albums: set[str] = set()
    skipped: list[str] = []

    for artist in tqdm(artists, desc="Selecting albums", unit="artist",
                       disable=not show_progress):
        try:
            selected = select_albums(artist, len(artists), catalog)
        except CurationError as e:
            log_skipped_artist(logger, artist, e.message)
            skipped.append(artist)
            continue

        logger.info(f"{artist}: {len(selected)} albums selected")
        for album_id in selected:
            if album_id not in seen_albums:
                seen_albums.add(album_id)
                album_ids.append(album_id)

    tracks = aggregate_tracks(album_ids, catalog, batch_size=album_batch_size)
    logger.info(f"{len(tracks)} tracks from {len(album_ids)} albums")

    assembler = PlaylistAssembler(catalog)
    playlist = assembler.create_playlist(", ".join(artists), mode)

    for batch in split([track.uri for track in tracks], track_batch_size):
        assembler.add_tracks(playlist.id, batch)

    return CurationResult(
        playlist=playlist,
        tracks=tuple(tracks),
        skipped_artists=tuple(skipped),
    )


def top_artist_names(catalog: CatalogService, limit: int = TOP_ARTISTS_LIMIT) -> list[str]:
    """
    Names of the current user's top artists.

    Raises:
        CurationError: If the catalog call fails.
    """
    try:
        items = catalog.get_user_top_artists(limit=limit)
    except SpotifyError as e:
        raise CurationError(
            f"Failed to fetch top artists: {e.message}",
            details={"limit": limit},
            cause=e
        ) from e
    return [Artist.from_spotify_api(item).name for item in items]


def clear_playlist(
    assembler: PlaylistAssembler,
    playlist_id: str,
    batch_size: int = MAX_TRACKS_PER_REQUEST
) -> bool:
    """
    Remove the tracks currently in a playlist, best effort.

    Only the first page of the playlist (100 items) is read, so longer
    playlists may need several calls.

    Returns:
        True if every removal batch succeeded (or there was nothing to
        remove), False otherwise. Failures are logged by the assembler.

    Raises:
        AssemblyError: If the playlist contents cannot be read.
    """
    items = assembler.playlist_tracks(playlist_id)
    uris = [
        {"uri": item["track"]["uri"]}
        for item in items
        if item.get("track") and item["track"].get("uri")
    ]

    ok = True
    for batch in split(uris, batch_size):
        ok = assembler.remove_tracks(playlist_id, batch) and ok
    if ok:
        logger.info(f"Removed {len(uris)} tracks from {playlist_id}")
    else:
        logger.warning(f"Some tracks could not be removed from {playlist_id}")
    return ok
