"""
Configuration management for hearitfresh.

This module handles loading, validating, and providing access to the
application configuration stored in config.yaml.

The configuration file contains:
    - Spotify API credentials (client_id, client_secret, redirect_uri)
    - Batch sizes used against the Spotify request-size limits
    - Optional log directory and console log level

Credentials can also come from the environment (or a .env file loaded
with python-dotenv). Environment values win over the file:
    SPOTIFY_CLIENT_ID, SPOTIFY_CLIENT_SECRET, SPOTIFY_REDIRECT_URI

Example config.yaml:
    spotify:
      client_id: "your_client_id_here"
      client_secret: "your_client_secret_here"
      redirect_uri: "http://127.0.0.1:8888/callback"

    curation:
      album_batch_size: 20
      track_batch_size: 100

    logging:
      directory: "~/.hearitfresh/logs"
      level: "INFO"
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from hearitfresh.core.exceptions import ConfigError


# Default configuration file name (looked up in current working directory)
CONFIG_FILENAME = "config.yaml"

DEFAULT_REDIRECT_URI = "http://127.0.0.1:8888/callback"

# Spotify Web API request-size ceilings
MAX_ALBUMS_PER_REQUEST = 20
MAX_TRACKS_PER_REQUEST = 100

ENV_CLIENT_ID = "SPOTIFY_CLIENT_ID"
ENV_CLIENT_SECRET = "SPOTIFY_CLIENT_SECRET"
ENV_REDIRECT_URI = "SPOTIFY_REDIRECT_URI"


@dataclass(frozen=True)
class SpotifyConfig:
    """
    Spotify API credentials configuration.

    Attributes:
        client_id: The Spotify application client ID.
        client_secret: The Spotify application client secret.
        redirect_uri: OAuth redirect URI registered for the application.
                      Playlist creation needs a user token, so the OAuth
                      flow is always used.
    """
    client_id: str
    client_secret: str
    redirect_uri: str = DEFAULT_REDIRECT_URI


@dataclass(frozen=True)
class CurationConfig:
    """
    Batching configuration.

    Attributes:
        album_batch_size: Album ids per get_albums request (1-20).
        track_batch_size: Track uris per playlist addition request (1-100).
    """
    album_batch_size: int = MAX_ALBUMS_PER_REQUEST
    track_batch_size: int = MAX_TRACKS_PER_REQUEST


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging configuration.

    Attributes:
        directory: Where log files go. None means console only.
        level: Console log level name.
    """
    directory: Path | None = None
    level: str = "INFO"


@dataclass(frozen=True)
class Config:
    """
    Complete application configuration, created by load_config().

    Example:
        config = load_config()
        catalog = SpotifyCatalog.connect(config.spotify)
        result = curate_playlist(
            artists, catalog,
            album_batch_size=config.curation.album_batch_size,
        )
    """
    spotify: SpotifyConfig
    curation: CurationConfig
    logging: LoggingConfig


def load_config(config_path: Path | None = None) -> Config:
    """
    Load and validate configuration from config.yaml and the environment.

    Args:
        config_path: Optional explicit path to config file.
                     If None, looks for config.yaml in current working directory.
                     When that default file does not exist, configuration is
                     taken from the environment alone.

    Returns:
        Config: A frozen dataclass containing all configuration values.

    Raises:
        ConfigError: If an explicit config file is missing, the YAML is
                     invalid, credentials are missing, or a value is out of range.
    """
    load_dotenv()

    explicit = config_path is not None
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        raw_config = _read_config_file(config_path)
    elif explicit:
        raise ConfigError(
            f"Configuration file not found: {config_path}",
            details={"file_path": str(config_path)}
        )
    else:
        raw_config = {}

    for section in ("spotify", "curation", "logging"):
        value = raw_config.get(section)
        if value is not None and not isinstance(value, dict):
            raise ConfigError(
                f"Section '{section}' must be a dictionary",
                details={"section": section}
            )

    return Config(
        spotify=_parse_spotify_config(raw_config.get("spotify") or {}),
        curation=_parse_curation_config(raw_config.get("curation") or {}),
        logging=_parse_logging_config(raw_config.get("logging") or {}),
    )


def _read_config_file(config_path: Path) -> dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            content = f.read()
    except IOError as e:
        raise ConfigError(
            f"Failed to read configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    try:
        raw_config = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML syntax in configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    # An empty file parses to None
    if raw_config is None:
        return {}

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a YAML dictionary",
            details={"file_path": str(config_path)}
        )

    return raw_config


def _parse_spotify_config(spotify_section: dict[str, Any]) -> SpotifyConfig:
    """
    Parse the Spotify section, letting environment variables override it.

    Raises:
        ConfigError: If client_id or client_secret ends up missing or empty.
    """
    client_id = os.getenv(ENV_CLIENT_ID) or spotify_section.get("client_id", "")
    client_secret = os.getenv(ENV_CLIENT_SECRET) or spotify_section.get("client_secret", "")
    redirect_uri = (
        os.getenv(ENV_REDIRECT_URI)
        or spotify_section.get("redirect_uri")
        or DEFAULT_REDIRECT_URI
    )

    if not isinstance(client_id, str) or not client_id.strip():
        raise ConfigError(
            f"'spotify.client_id' must be a non-empty string (or set {ENV_CLIENT_ID})",
            details={"field": "spotify.client_id"}
        )

    if not isinstance(client_secret, str) or not client_secret.strip():
        raise ConfigError(
            f"'spotify.client_secret' must be a non-empty string (or set {ENV_CLIENT_SECRET})",
            details={"field": "spotify.client_secret"}
        )

    if not isinstance(redirect_uri, str):
        raise ConfigError(
            "'spotify.redirect_uri' must be a string",
            details={"field": "spotify.redirect_uri"}
        )

    return SpotifyConfig(
        client_id=client_id.strip(),
        client_secret=client_secret.strip(),
        redirect_uri=redirect_uri.strip()
    )


def _parse_batch_size(section: dict[str, Any], field: str, maximum: int) -> int:
    raw = section.get(field)
    if raw is None:
        return maximum
    # bool is an int subclass; reject it explicitly
    if not isinstance(raw, int) or isinstance(raw, bool) or not 1 <= raw <= maximum:
        raise ConfigError(
            f"'curation.{field}' must be an integer between 1 and {maximum}",
            details={"field": f"curation.{field}", "value": raw}
        )
    return raw


def _parse_curation_config(curation_section: dict[str, Any]) -> CurationConfig:
    return CurationConfig(
        album_batch_size=_parse_batch_size(
            curation_section, "album_batch_size", MAX_ALBUMS_PER_REQUEST
        ),
        track_batch_size=_parse_batch_size(
            curation_section, "track_batch_size", MAX_TRACKS_PER_REQUEST
        ),
    )


def _parse_logging_config(logging_section: dict[str, Any]) -> LoggingConfig:
    """
    Parse the logging section.

    Expands ~ in the directory. Does NOT create it (setup_logging() does).
    """
    directory = None
    raw_dir = logging_section.get("directory")
    if raw_dir is not None:
        if not isinstance(raw_dir, str) or not raw_dir.strip():
            raise ConfigError(
                "'logging.directory' must be a non-empty string",
                details={"field": "logging.directory"}
            )
        directory = Path(raw_dir.strip()).expanduser().resolve()

    level = logging_section.get("level", "INFO")
    if not isinstance(level, str) or not isinstance(
        logging.getLevelName(level.upper()), int
    ):
        raise ConfigError(
            f"'logging.level' is not a valid log level: {level}",
            details={"field": "logging.level", "value": level}
        )

    return LoggingConfig(directory=directory, level=level.upper())
