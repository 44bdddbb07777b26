"""Test per-artist album selection"""

import pytest
from unittest.mock import patch

from hearitfresh.core.exceptions import ArtistNotFound, CurationError, SpotifyError
from hearitfresh.curation.albums import select_albums
from hearitfresh.spotify.models import ArtistQuery, album_quota


def _albums(*names):
    return [{'id': f'album_{i}', 'name': name} for i, name in enumerate(names)]


class TestQuota:
    """Test the per-artist album quota"""

    def test_full_batch_quota(self):
        """Twenty artists get five albums each"""
        assert album_quota(20) == 5

    def test_scaled_quota(self):
        """Other counts split a budget of 100"""
        assert album_quota(5) == 10
        assert album_quota(1) == 50
        assert album_quota(3) == 16
        assert album_quota(19) == 2
        assert album_quota(21) == 2
        assert album_quota(60) == 0

    def test_zero_artists_rejected(self):
        """A run without artists is a caller bug"""
        with pytest.raises(ValueError):
            album_quota(0)

    def test_artist_query_quota(self):
        """ArtistQuery exposes the same quota"""
        assert ArtistQuery('Queen', 20).quota == 5


class TestSelectAlbums:
    """Test select_albums()"""

    def test_keyword_filter_and_small_set(self, catalog):
        """Blacklisted titles go, the rest fit in the quota"""
        catalog.get_artist_albums.return_value = _albums(
            'Album (Remix)', 'Album', 'Album Live', 'B'
        )

        result = select_albums('Test Artist', 20, catalog)

        assert result == ['album_1', 'album_3']

    def test_catalog_called_with_expected_arguments(self, catalog):
        """One best-match search, ten studio albums"""
        select_albums('Queen', 5, catalog)

        catalog.search_artist.assert_called_once_with('Queen', limit=1, offset=0)
        catalog.get_artist_albums.assert_called_once_with(
            'artist_123', limit=10, album_type='album', include_groups='album'
        )

    def test_sample_bounded_by_quota(self, catalog):
        """More survivors than quota gives exactly quota distinct ids"""
        catalog.get_artist_albums.return_value = _albums(*[f'Record {i}' for i in range(10)])
        all_ids = {f'album_{i}' for i in range(10)}

        for _ in range(20):
            result = select_albums('Test Artist', 20, catalog)
            assert len(result) == 5
            assert len(set(result)) == 5
            assert set(result) <= all_ids

    def test_sample_uses_random_sample(self, catalog):
        """Sampling goes through random.sample over the survivors"""
        catalog.get_artist_albums.return_value = _albums(*[f'Record {i}' for i in range(8)])

        with patch('hearitfresh.curation.albums.random.sample',
                   side_effect=lambda population, k: list(population)[-k:]) as sample:
            result = select_albums('Test Artist', 20, catalog)

        sample.assert_called_once()
        assert result == ['album_3', 'album_4', 'album_5', 'album_6', 'album_7']

    def test_everything_returned_when_it_fits(self, catalog):
        """Survivors up to the quota are all returned"""
        catalog.get_artist_albums.return_value = _albums(*[f'Record {i}' for i in range(10)])

        result = select_albums('Test Artist', 5, catalog)

        assert sorted(result) == sorted(f'album_{i}' for i in range(10))

    def test_artist_not_found(self, catalog):
        """An empty search result raises ArtistNotFound"""
        catalog.search_artist.return_value = []

        with pytest.raises(ArtistNotFound) as exc_info:
            select_albums('Nobody', 2, catalog)

        assert exc_info.value.artist == 'Nobody'
        catalog.get_artist_albums.assert_not_called()

    def test_catalog_failure_wrapped(self, catalog):
        """Catalog errors surface as CurationError with the cause kept"""
        error = SpotifyError('boom')
        catalog.get_artist_albums.side_effect = error

        with pytest.raises(CurationError) as exc_info:
            select_albums('Queen', 2, catalog)

        assert exc_info.value.cause is error
        assert exc_info.value.__cause__ is error
        assert catalog.get_artist_albums.call_count == 1

    def test_quota_comes_from_artist_query(self, catalog):
        """The run size is turned into an ArtistQuery before sampling"""
        catalog.get_artist_albums.return_value = _albums(*[f'Record {i}' for i in range(10)])

        with patch('hearitfresh.curation.albums.ArtistQuery', wraps=ArtistQuery) as query:
            result = select_albums('Test Artist', 25, catalog)

        query.assert_called_once_with('Test Artist', 25)
        assert len(result) == ArtistQuery('Test Artist', 25).quota == 2

    def test_zero_artists_rejected_before_search(self, catalog):
        """An invalid run size fails before any catalog call"""
        with pytest.raises(ValueError):
            select_albums('Queen', 0, catalog)

        catalog.search_artist.assert_not_called()
