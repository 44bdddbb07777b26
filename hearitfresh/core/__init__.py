"""
Core module for hearitfresh.

This module provides the foundational components used throughout the application:
    - exceptions: Custom exception classes for error handling
    - config: Configuration loading and validation
    - logger: Logging system with console and file outputs

Usage:
    from hearitfresh.core import (
        Config, load_config,
        setup_logging, get_logger,
        HearItFreshError, CurationError, AssemblyError
    )
"""

from hearitfresh.core.config import (
    Config,
    CurationConfig,
    LoggingConfig,
    SpotifyConfig,
    load_config,
)
from hearitfresh.core.exceptions import (
    ArtistNotFound,
    AssemblyError,
    ConfigError,
    CurationError,
    HearItFreshError,
    SpotifyError,
)
from hearitfresh.core.logger import (
    get_logger,
    log_skipped_artist,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    # Config
    "Config",
    "SpotifyConfig",
    "CurationConfig",
    "LoggingConfig",
    "load_config",
    # Exceptions
    "HearItFreshError",
    "ConfigError",
    "SpotifyError",
    "CurationError",
    "ArtistNotFound",
    "AssemblyError",
    # Logger
    "setup_logging",
    "get_logger",
    "log_skipped_artist",
    "shutdown_logging",
]
