"""Test batched track aggregation"""

import pytest

from hearitfresh.core.exceptions import CurationError, SpotifyError
from hearitfresh.curation.tracks import aggregate_tracks
from hearitfresh.spotify.models import Track

from conftest import make_album


class TestAggregateTracks:
    """Test aggregate_tracks()"""

    def test_album_count_drives_batching(self, catalog):
        """30 tracks over 2 albums is a single request"""
        catalog.get_albums.return_value = [
            make_album('a1', 'First', [f'Song {i}' for i in range(15)]),
            make_album('a2', 'Second', [f'Tune {i}' for i in range(15)]),
        ]

        result = aggregate_tracks(['a1', 'a2'], catalog, batch_size=20)

        catalog.get_albums.assert_called_once_with(['a1', 'a2'])
        assert len(result) == 30
        assert result[0] == Track('Song 0', 'First', 'spotify:track:a1-0')
        assert result[-1].album_name == 'Second'

    def test_batches_requested_in_order(self, catalog):
        """Album ids are split by batch_size and fetched sequentially"""
        ids = [f'id{i}' for i in range(5)]
        catalog.get_albums.side_effect = lambda batch: [
            make_album(album_id, album_id, [f'{album_id} track']) for album_id in batch
        ]

        result = aggregate_tracks(ids, catalog, batch_size=2)

        assert [c.args[0] for c in catalog.get_albums.call_args_list] == [
            ['id0', 'id1'], ['id2', 'id3'], ['id4']
        ]
        assert [t.name for t in result] == [f'id{i} track' for i in range(5)]

    def test_filter_applied_within_batch(self, catalog):
        """Variants and repeats inside a batch are removed"""
        catalog.get_albums.return_value = [
            make_album('a1', 'One', ['Intro', 'Hit', 'Hit (Radio Edit)']),
            make_album('a2', 'Two', ['Hit', 'Outro']),
        ]

        result = aggregate_tracks(['a1', 'a2'], catalog)

        assert [(t.name, t.album_name) for t in result] == [
            ('Intro', 'One'), ('Hit', 'One'), ('Outro', 'Two')
        ]

    def test_dedup_does_not_cross_batches(self, catalog):
        """A title repeated in another batch is kept"""
        catalog.get_albums.side_effect = [
            [make_album('a1', 'One', ['Hit', 'Intro'])],
            [make_album('a2', 'Two', ['Hit'])],
        ]

        result = aggregate_tracks(['a1', 'a2'], catalog, batch_size=1)

        assert [t.name for t in result] == ['Hit', 'Intro', 'Hit']

    def test_no_albums_no_requests(self, catalog):
        """Empty input does not touch the catalog"""
        assert aggregate_tracks([], catalog) == []
        catalog.get_albums.assert_not_called()

    def test_failure_discards_partial_results(self, catalog):
        """A failing batch aborts everything"""
        error = SpotifyError('502')
        catalog.get_albums.side_effect = [
            [make_album('a1', 'One', ['Hit'])],
            error,
            [make_album('a3', 'Three', ['Other'])],
        ]

        with pytest.raises(CurationError) as exc_info:
            aggregate_tracks(['a1', 'a2', 'a3'], catalog, batch_size=1)

        assert exc_info.value.cause is error
        assert catalog.get_albums.call_count == 2
