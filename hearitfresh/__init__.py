"""
hearitfresh: curate Spotify playlists from a list of artists.

For every artist a bounded number of studio albums is sampled, their
tracks are fetched in batches, remixes/live versions/repeated titles
are filtered out, and the result is written into a new playlist.

Modules:
    core/       - Configuration, logging, exceptions
    spotify/    - Catalog interface, spotipy implementation, data models
    curation/   - Album selection, track aggregation, playlist assembly
    cli.py      - Command-line interface

Python API:
    from hearitfresh.core import load_config, setup_logging
    from hearitfresh.spotify import SpotifyCatalog
    from hearitfresh.curation import curate_playlist

    config = load_config()
    setup_logging(config.logging.directory)
    catalog = SpotifyCatalog.connect(config.spotify)
    result = curate_playlist(["The Beatles", "Queen"], catalog, mode="new")
    print(result.playlist.link)

Configuration:
    config.yaml in the current directory (or SPOTIFY_* environment variables):

        spotify:
          client_id: "your_client_id"
          client_secret: "your_client_secret"
"""

__version__ = "0.1.0"
__license__ = "MIT"
