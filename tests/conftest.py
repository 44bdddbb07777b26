"""Test configuration and fixtures"""

import pytest
from unittest.mock import Mock

from hearitfresh.spotify.catalog import CatalogService


def make_album(album_id, name, track_names=()):
    """Full album object as returned by get_albums"""
    return {
        'id': album_id,
        'name': name,
        'tracks': {
            'items': [
                {'name': track, 'uri': f'spotify:track:{album_id}-{i}'}
                for i, track in enumerate(track_names)
            ]
        }
    }


@pytest.fixture
def catalog():
    """Catalog double with sensible defaults"""
    catalog = Mock(spec=CatalogService)
    catalog.search_artist.return_value = [{'id': 'artist_123', 'name': 'Test Artist'}]
    catalog.get_artist_albums.return_value = []
    catalog.get_albums.return_value = []
    catalog.get_user_top_artists.return_value = []
    catalog.create_playlist.return_value = {
        'uri': 'spotify:playlist:pl_123',
        'external_urls': {'spotify': 'https://open.spotify.com/playlist/pl_123'},
        'name': 'PlayList Generated By HearItFresh',
    }
    catalog.add_tracks_to_playlist.return_value = {'snapshot_id': 'snap'}
    catalog.remove_tracks_from_playlist.return_value = {'snapshot_id': 'snap'}
    catalog.get_playlist_tracks.return_value = []
    return catalog


@pytest.fixture
def config_file(tmp_path):
    """Minimal valid config.yaml"""
    path = tmp_path / 'config.yaml'
    path.write_text(
        'spotify:\n'
        '  client_id: "file_id"\n'
        '  client_secret: "file_secret"\n',
        encoding='utf-8'
    )
    return path


@pytest.fixture(autouse=True)
def clean_spotify_env(monkeypatch):
    """Keep real credentials in the environment out of the tests"""
    for var in ('SPOTIFY_CLIENT_ID', 'SPOTIFY_CLIENT_SECRET', 'SPOTIFY_REDIRECT_URI'):
        monkeypatch.delenv(var, raising=False)
    # load_dotenv must not pick up a developer's .env
    monkeypatch.setattr('hearitfresh.core.config.load_dotenv', lambda: None)
