"""
Logging configuration for hearitfresh.

This module sets up the logging system with these outputs:
    - Console: colored, tqdm-compatible messages
    - log_full_{timestamp}.log: Complete log of all events (DEBUG and above)
    - log_errors_{timestamp}.log: Only ERROR and CRITICAL level messages
    - skipped_artists_{timestamp}.log: Artists left out of a playlist and why

File outputs are only created when a log directory is configured.

Usage:
    from hearitfresh.core.logger import setup_logging, get_logger

    setup_logging(log_dir)  # Call once at startup
    logger = get_logger(__name__)  # Get logger for each module

    logger.info("Selecting albums")
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

from tqdm import tqdm


SKIPPED_ARTISTS_FILENAME = "skipped_artists"

# Log format for file output (detailed with timestamp)
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    WHITE = "\033[37m"
    BOLD = "\033[1m"


class ColoredConsoleFormatter(logging.Formatter):
    """
    Formatter that colors the level name for console output.

    Colors:
        - DEBUG: Blue
        - INFO: Green
        - WARNING: Yellow
        - ERROR: Red
        - CRITICAL: Bold Red
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.BLUE,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        colored_levelname = f"{color}{record.levelname}{Colors.RESET}"
        return f"{colored_levelname}: {record.getMessage()}"


class TqdmLoggingHandler(logging.Handler):
    """
    Logging handler that writes through tqdm.write().

    The pipeline can show a tqdm progress bar while selecting albums;
    writing log lines with tqdm.write() keeps them above the bar instead
    of tearing it.
    """

    def __init__(self, stream: TextIO = sys.stderr) -> None:
        super().__init__()
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            tqdm.write(msg, file=self.stream)
        except Exception:
            self.handleError(record)


class SkippedArtistHandler(logging.Handler):
    """
    Handler that collects artists skipped during album selection.

    It only reacts to records carrying the 'skipped_artist_name' extra
    field (see log_skipped_artist()) and writes them as:

        Some Artist
        Reason: Artist not found: Some Artist

    Attributes:
        report_path: Path to the skipped artists file.
        report_file: Open file handle, set by open().
    """

    def __init__(self, report_path: Path) -> None:
        super().__init__()
        self.report_path = report_path
        self.report_file: TextIO | None = None

    def open(self) -> None:
        """Open the report file, overwriting existing content."""
        self.report_file = open(self.report_path, "w", encoding="utf-8")

    def emit(self, record: logging.LogRecord) -> None:
        if not hasattr(record, "skipped_artist_name"):
            return

        if self.report_file is None:
            return

        try:
            artist = getattr(record, "skipped_artist_name", "Unknown")
            reason = getattr(record, "skipped_artist_reason", "")
            self.report_file.write(f"{artist}\n")
            self.report_file.write(f"Reason: {reason}\n\n")
            self.report_file.flush()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        """Close the report file handle. Safe to call multiple times."""
        if self.report_file is not None:
            try:
                self.report_file.close()
            except OSError:
                pass
            self.report_file = None
        super().close()


class ErrorOnlyFilter(logging.Filter):
    """Filter that only allows ERROR and CRITICAL level records."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def setup_logging(log_dir: Path | None = None, level: str = "INFO") -> None:
    """
    Configure the logging system for the application.

    Call ONCE at startup, after the configuration is loaded.

    Args:
        log_dir: Directory for log files. None means console output only.
        level: Console log level name ("DEBUG", "INFO", ...).

    Behavior:
        1. Configure root logger level to DEBUG and drop existing handlers
        2. Console handler (TqdmLoggingHandler) at the given level
        3. If log_dir is set, create it and add:
           - full log file handler (DEBUG)
           - error log file handler (ERROR+ via ErrorOnlyFilter)
           - skipped artists handler
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Close and remove any existing handlers (a second call must not leak files)
    for handler in root_logger.handlers[:]:
        handler.flush()
        handler.close()
        root_logger.removeHandler(handler)

    console_handler = TqdmLoggingHandler()
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(ColoredConsoleFormatter())
    root_logger.addHandler(console_handler)

    # spotipy and urllib3 are chatty at DEBUG
    logging.getLogger("spotipy").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    if log_dir is None:
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")

    full_handler = logging.FileHandler(
        log_dir / f"log_full_{timestamp}.log", mode="w", encoding="utf-8"
    )
    full_handler.setLevel(logging.DEBUG)
    full_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
    root_logger.addHandler(full_handler)

    error_handler = logging.FileHandler(
        log_dir / f"log_errors_{timestamp}.log", mode="w", encoding="utf-8"
    )
    error_handler.setLevel(logging.DEBUG)  # Filter handles the level restriction
    error_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
    error_handler.addFilter(ErrorOnlyFilter())
    root_logger.addHandler(error_handler)

    skipped_handler = SkippedArtistHandler(
        log_dir / f"{SKIPPED_ARTISTS_FILENAME}_{timestamp}.log"
    )
    skipped_handler.open()
    root_logger.addHandler(skipped_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The logger name, typically __name__ of the calling module.

    Returns:
        logging.Logger: A logger instance configured by setup_logging().
    """
    return logging.getLogger(name)


def log_skipped_artist(logger: logging.Logger, artist: str, reason: str) -> None:
    """
    Log an artist that was left out of the playlist.

    Emits a WARNING with the extra fields SkippedArtistHandler looks for.

    Example:
        log_skipped_artist(logger, "Some Artist", "Artist not found: Some Artist")
    """
    logger.warning(
        f"Skipping artist {artist}: {reason}",
        extra={
            "skipped_artist_name": artist,
            "skipped_artist_reason": reason,
        }
    )


def shutdown_logging() -> None:
    """
    Flush, close and detach all root handlers.

    Typically called in a finally block at application exit.
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        handler.flush()
        handler.close()
        root_logger.removeHandler(handler)
