"""
Exception classes for hearitfresh.

This module defines all custom exceptions used throughout the application.
Each exception carries a human-readable message plus an optional details
dictionary, and wraps the underlying catalog error where there is one.

Exception Hierarchy:
    HearItFreshError (base)
        ConfigError - Configuration file issues
        SpotifyError - Spotify API issues (raised by the catalog layer)
        CurationError - Album selection / track aggregation failed
            ArtistNotFound - Artist search returned no match
        AssemblyError - Playlist creation or track addition failed
"""


class HearItFreshError(Exception):
    """
    Base exception for all hearitfresh errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context (artist, playlist id...).

    Example:
        try:
            result = curate_playlist(artists, catalog)
        except HearItFreshError as e:
            logger.error(f"Curation failed: {e.message}")
            if e.details:
                logger.debug(f"Details: {e.details}")
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error description that will be shown to the user.
            details: Optional dictionary containing additional context about the error.
                     Common keys include:
                     - 'artist': Artist name being curated
                     - 'playlist_id': Playlist involved in the error
                     - 'original_error': The underlying exception text
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the error message for display."""
        return self.message


class ConfigError(HearItFreshError):
    """
    Raised when there's an issue with the configuration file.

    This is a CRITICAL error that should stop program execution.

    Common causes:
        - config.yaml not found
        - config.yaml has invalid YAML syntax
        - Spotify credentials missing from both the file and the environment
        - Batch sizes outside the limits Spotify accepts
    """
    pass


class SpotifyError(HearItFreshError):
    """
    Raised by the catalog layer when a Spotify Web API call fails.

    Every spotipy exception is translated into this class so that the
    curation code only ever has to deal with one error type per call.

    Attributes:
        is_auth_error: True if this is an authentication error (CRITICAL).
        is_rate_limit: True if Spotify answered 429. Not retried here.

    Example:
        raise SpotifyError(
            "Failed to fetch albums batch: ...",
            details={'batch_size': 20, 'http_status': 502}
        )
    """

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        is_auth_error: bool = False,
        is_rate_limit: bool = False
    ) -> None:
        super().__init__(message, details)
        self.is_auth_error = is_auth_error
        self.is_rate_limit = is_rate_limit


class CurationError(HearItFreshError):
    """
    Raised when album selection or track aggregation fails.

    The failing catalog error is kept in `cause` and also chained with
    `raise ... from`, so tracebacks show both.

    Scope:
        - During album selection the error is scoped to one artist; the
          pipeline records it and moves on to the next artist.
        - During track aggregation it aborts the whole aggregation and no
          partial track list is returned.

    Attributes:
        cause: The underlying exception, or None.
    """

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        cause: BaseException | None = None
    ) -> None:
        super().__init__(message, details)
        self.cause = cause


class ArtistNotFound(CurationError):
    """
    Raised when the artist search yields no result at all.

    Attributes:
        artist: The name that was searched for.
    """

    def __init__(self, artist: str) -> None:
        super().__init__(
            f"Artist not found: {artist}",
            details={"artist": artist}
        )
        self.artist = artist


class AssemblyError(HearItFreshError):
    """
    Raised when a playlist cannot be created or tracks cannot be added.

    Track removal never raises this; see PlaylistAssembler.remove_tracks().

    Attributes:
        cause: The underlying exception, or None.
    """

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        cause: BaseException | None = None
    ) -> None:
        super().__init__(message, details)
        self.cause = cause
