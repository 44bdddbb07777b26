"""Test logging setup"""

import logging

import pytest

from hearitfresh.core.logger import (
    SkippedArtistHandler,
    get_logger,
    log_skipped_artist,
    setup_logging,
    shutdown_logging,
)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest left it"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    shutdown_logging()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLogging:
    """Test logger configuration"""

    def test_console_only(self, restore_root_logger):
        """Without a directory only the console handler is installed"""
        setup_logging(None, 'WARNING')

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].level == logging.WARNING

    def test_file_outputs(self, tmp_path, restore_root_logger):
        """Full, error and skipped-artist logs are written"""
        setup_logging(tmp_path, 'INFO')
        logger = get_logger('hearitfresh.test')

        logger.info('selecting albums')
        logger.error('batch failed')
        log_skipped_artist(logger, 'Nobody', 'Artist not found: Nobody')
        shutdown_logging()

        full = next(tmp_path.glob('log_full_*.log')).read_text(encoding='utf-8')
        errors = next(tmp_path.glob('log_errors_*.log')).read_text(encoding='utf-8')
        skipped = next(tmp_path.glob('skipped_artists_*.log')).read_text(encoding='utf-8')

        assert 'selecting albums' in full
        assert 'Skipping artist Nobody' in full
        assert 'batch failed' in errors
        assert 'selecting albums' not in errors
        assert skipped == 'Nobody\nReason: Artist not found: Nobody\n\n'

    def test_second_setup_closes_previous_files(self, tmp_path, restore_root_logger):
        """Calling setup_logging again releases the earlier log files"""
        setup_logging(tmp_path / 'first', 'INFO')
        first_handlers = logging.getLogger().handlers[:]
        file_handlers = [h for h in first_handlers if isinstance(h, logging.FileHandler)]
        skipped_handlers = [h for h in first_handlers if isinstance(h, SkippedArtistHandler)]

        setup_logging(None, 'INFO')

        assert not set(first_handlers) & set(logging.getLogger().handlers)
        assert len(file_handlers) == 2
        assert all(h.stream is None for h in file_handlers)
        assert skipped_handlers[0].report_file is None

    def test_skipped_handler_ignores_other_records(self, tmp_path):
        """Only records with skipped_artist_* fields are written"""
        handler = SkippedArtistHandler(tmp_path / 'skipped.log')
        handler.open()
        handler.emit(logging.LogRecord('x', logging.WARNING, __file__, 1, 'plain', None, None))
        handler.close()
        handler.close()

        assert (tmp_path / 'skipped.log').read_text(encoding='utf-8') == ''
