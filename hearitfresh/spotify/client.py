"""
Spotify-backed catalog service for hearitfresh.

This module wraps the spotipy library and implements the CatalogService
interface used by the curation pipeline. Unlike a process-wide singleton,
a SpotifyCatalog is created once by the caller and passed explicitly to
every component that needs it.

Authentication:
    Playlist creation and top-artists both need a user token, so the
    OAuth authorization code flow (SpotifyOAuth) is always used. The
    token is cached by spotipy between runs.

Error Handling:
    Every spotipy.SpotifyException and requests.RequestException is
    translated into SpotifyError. HTTP 429 sets is_rate_limit, HTTP 401
    sets is_auth_error. Nothing is retried at this level beyond what
    spotipy's own session does.

Usage:
    from hearitfresh.spotify.client import SpotifyCatalog

    catalog = SpotifyCatalog.connect(config.spotify)
    albums = catalog.get_artist_albums(artist_id, limit=10)
"""

from typing import Any, Sequence

import requests
import spotipy
from spotipy.oauth2 import SpotifyOAuth, SpotifyOauthError

from hearitfresh.core.config import SpotifyConfig
from hearitfresh.core.exceptions import SpotifyError
from hearitfresh.core.logger import get_logger

logger = get_logger(__name__)

# Scopes for creating/editing playlists and reading top artists
OAUTH_SCOPE = (
    "playlist-modify-public playlist-modify-private "
    "playlist-read-private user-top-read"
)


def _translate_error(
    error: Exception, message: str, details: dict[str, Any]
) -> SpotifyError:
    """
    Build the SpotifyError for a failed spotipy call.

    Args:
        error: The exception raised by spotipy or requests.
        message: What was being attempted, e.g. "Failed to fetch albums batch".
        details: Context for the error (ids, batch size...).
    """
    details = dict(details)
    details["original_error"] = str(error)

    if isinstance(error, spotipy.SpotifyException):
        details["http_status"] = error.http_status
        if error.http_status == 429:
            return SpotifyError(
                f"Rate limited: {message}", details=details, is_rate_limit=True
            )
        if error.http_status == 401:
            return SpotifyError(
                f"Authentication expired or invalid: {message}",
                details=details,
                is_auth_error=True
            )

    return SpotifyError(f"{message}: {error}", details=details)


class SpotifyCatalog:
    """
    CatalogService implementation on top of spotipy.Spotify.

    Attributes:
        _spotify: The underlying spotipy.Spotify instance.
        _user_id: Cached id of the authenticated user (for playlist creation).

    Example:
        catalog = SpotifyCatalog(spotipy.Spotify(auth_manager=auth_manager))
        artists = catalog.search_artist("Queen", limit=1)
    """

    def __init__(self, spotify_instance: spotipy.Spotify) -> None:
        self._spotify = spotify_instance
        self._user_id: str | None = None

    @classmethod
    def connect(cls, config: SpotifyConfig) -> "SpotifyCatalog":
        """
        Create a catalog authenticated as the current user.

        Args:
            config: Spotify credentials and redirect URI.

        Returns:
            A ready SpotifyCatalog.

        Raises:
            SpotifyError: If authentication fails.

        Behavior:
            1. Build SpotifyOAuth with OAUTH_SCOPE (opens the browser on
               first use, cached token afterwards)
            2. Create the spotipy instance
            3. Test the connection with current_user()
        """
        try:
            auth_manager = SpotifyOAuth(
                client_id=config.client_id,
                client_secret=config.client_secret,
                redirect_uri=config.redirect_uri,
                scope=OAUTH_SCOPE,
                open_browser=True
            )
            spotify_instance = spotipy.Spotify(auth_manager=auth_manager)
            user = spotify_instance.current_user()
        except (spotipy.SpotifyException, SpotifyOauthError,
                requests.RequestException) as e:
            raise SpotifyError(
                f"Spotify authentication failed: {e}",
                details={"original_error": str(e)},
                is_auth_error=True
            ) from e

        catalog = cls(spotify_instance)
        catalog._user_id = user["id"]
        logger.debug(f"Authenticated as Spotify user {catalog._user_id}")
        return catalog

    # =========================================================================
    # Artist Operations
    # =========================================================================

    def search_artist(
        self, name: str, limit: int = 1, offset: int = 0
    ) -> list[dict[str, Any]]:
        """
        Search artists by name.

        Returns:
            Artist objects, best match first. Empty list if nothing matched.
        """
        try:
            result = self._spotify.search(
                q=name, type="artist", limit=limit, offset=offset
            )
        except (spotipy.SpotifyException, requests.RequestException) as e:
            raise _translate_error(
                e, "Failed to search artist", {"artist": name}
            ) from e
        return ((result or {}).get("artists") or {}).get("items") or []

    def get_artist_albums(
        self,
        artist_id: str,
        limit: int = 10,
        album_type: str = "album",
        include_groups: str = "album",
    ) -> list[dict[str, Any]]:
        """
        Get an artist's albums (first page only).

        Args:
            artist_id: Spotify artist ID.
            limit: Maximum albums to return (max 50).
            album_type: Kept for interface symmetry; recent spotipy versions
                        fold it into include_groups.
            include_groups: Comma-separated groups, "album" excludes singles
                            and compilations.
        """
        try:
            result = self._spotify.artist_albums(
                artist_id,
                include_groups=include_groups or album_type,
                limit=limit,
            )
        except (spotipy.SpotifyException, requests.RequestException) as e:
            raise _translate_error(
                e, "Failed to fetch artist albums", {"artist_id": artist_id}
            ) from e
        return (result or {}).get("items") or []

    def get_user_top_artists(self, limit: int = 10) -> list[dict[str, Any]]:
        """Get the current user's top artists (medium term)."""
        try:
            result = self._spotify.current_user_top_artists(limit=limit)
        except (spotipy.SpotifyException, requests.RequestException) as e:
            raise _translate_error(
                e, "Failed to fetch top artists", {"limit": limit}
            ) from e
        return (result or {}).get("items") or []

    # =========================================================================
    # Album Operations
    # =========================================================================

    def get_albums(self, album_ids: Sequence[str]) -> list[dict[str, Any]]:
        """
        Get full album objects (with track listings) in a single request.

        Args:
            album_ids: Up to 20 Spotify album IDs (Spotify API limit).
                       Callers split longer lists themselves.

        Returns:
            Album objects in input order. Ids Spotify could not resolve
            are left out.
        """
        if not album_ids:
            return []

        try:
            response = self._spotify.albums(list(album_ids))
        except (spotipy.SpotifyException, requests.RequestException) as e:
            raise _translate_error(
                e, "Failed to fetch albums batch", {"batch_size": len(album_ids)}
            ) from e

        return [album for album in (response or {}).get("albums", []) if album]

    # =========================================================================
    # Playlist Operations
    # =========================================================================

    def _current_user_id(self) -> str:
        if self._user_id is None:
            try:
                self._user_id = self._spotify.current_user()["id"]
            except (spotipy.SpotifyException, requests.RequestException) as e:
                raise _translate_error(e, "Failed to fetch current user", {}) from e
        return self._user_id

    def create_playlist(
        self, name: str, description: str = "", public: bool = True
    ) -> dict[str, Any]:
        """
        Create a playlist owned by the authenticated user.

        Returns:
            The new playlist object (uri, external_urls, name, ...).
        """
        user_id = self._current_user_id()
        try:
            return self._spotify.user_playlist_create(
                user_id, name, public=public, description=description
            )
        except (spotipy.SpotifyException, requests.RequestException) as e:
            raise _translate_error(
                e, "Failed to create playlist", {"name": name}
            ) from e

    def add_tracks_to_playlist(
        self, playlist_id: str, uris: Sequence[str]
    ) -> dict[str, Any]:
        """Append up to 100 track uris to a playlist."""
        try:
            return self._spotify.playlist_add_items(playlist_id, list(uris))
        except (spotipy.SpotifyException, requests.RequestException) as e:
            raise _translate_error(
                e,
                "Failed to add tracks to playlist",
                {"playlist_id": playlist_id, "batch_size": len(uris)}
            ) from e

    def remove_tracks_from_playlist(
        self, playlist_id: str, tracks: Sequence[dict[str, str]]
    ) -> dict[str, Any]:
        """Remove every occurrence of the given {uri} items from a playlist."""
        try:
            return self._spotify.playlist_remove_all_occurrences_of_items(
                playlist_id, [track["uri"] for track in tracks]
            )
        except (spotipy.SpotifyException, requests.RequestException) as e:
            raise _translate_error(
                e,
                "Failed to remove tracks from playlist",
                {"playlist_id": playlist_id, "batch_size": len(tracks)}
            ) from e

    def get_playlist_tracks(self, playlist_id: str) -> list[dict[str, Any]]:
        """
        Get the first page (up to 100) of a playlist's track items.

        Each item is a playlist track object; the track itself is under "track".
        """
        try:
            result = self._spotify.playlist_items(
                playlist_id, additional_types=["track"]
            )
        except (spotipy.SpotifyException, requests.RequestException) as e:
            raise _translate_error(
                e, "Failed to fetch playlist items", {"playlist_id": playlist_id}
            ) from e
        return (result or {}).get("items") or []
