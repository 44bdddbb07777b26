"""
Album selection for one artist.

Each artist of a run (an ArtistQuery) contributes at most `query.quota`
studio albums. Albums whose title looks like a remix, live recording
or tour release are dropped before sampling.
"""

import random

from hearitfresh.core.exceptions import ArtistNotFound, CurationError, SpotifyError
from hearitfresh.core.logger import get_logger
from hearitfresh.curation.filters import exclude_blacklisted
from hearitfresh.spotify.catalog import CatalogService
from hearitfresh.spotify.models import Album, Artist, ArtistQuery

logger = get_logger(__name__)

# Albums requested per artist before filtering and sampling
ARTIST_ALBUMS_LIMIT = 10


def select_albums(
    artist: str,
    total_artists: int,
    catalog: CatalogService
) -> list[str]:
    """
    Pick album ids for one artist of a run.

    Args:
        artist: Artist name; the first search hit is used.
        total_artists: Number of artists in the run, drives the quota.
        catalog: Catalog to query.

    Returns:
        Album ids. All surviving albums (catalog order) when they fit in
        the quota, otherwise a uniform random sample of `quota` of them.

    Raises:
        ValueError: If total_artists is not positive.
        ArtistNotFound: If the search has no result.
        CurationError: If a catalog call fails. Not retried.
    """
    query = ArtistQuery(artist, total_artists)
    quota = query.quota

    try:
        matches = catalog.search_artist(query.name, limit=1, offset=0)
        if not matches:
            raise ArtistNotFound(query.name)
        found = Artist.from_spotify_api(matches[0])

        album_data = catalog.get_artist_albums(
            found.id,
            limit=ARTIST_ALBUMS_LIMIT,
            album_type="album",
            include_groups="album",
        )
    except SpotifyError as e:
        raise CurationError(
            f"Album selection failed for {artist}: {e.message}",
            details={"artist": artist},
            cause=e
        ) from e

    albums = exclude_blacklisted(Album.from_spotify_api(a) for a in album_data)
    logger.debug(
        f"{found.name}: {len(albums)}/{len(album_data)} albums survive filtering, quota {quota}"
    )

    if len(albums) <= quota:
        return [album.id for album in albums]

    return [album.id for album in random.sample(albums, quota)]
