"""Tests for logging setup."""

import logging

import pytest

from boxpool.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger('boxpool')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for the boxpool logger tree."""

    def test_file_logging(self, tmp_path):
        setup_logging(log_dir=tmp_path / 'logs', log_to_console=False)
        get_logger('boxpool.grid').info('recomputed winners')

        files = list((tmp_path / 'logs').glob('boxpool_*.log'))
        assert len(files) == 1
        for handler in logging.getLogger('boxpool').handlers:
            handler.flush()
        assert 'recomputed winners' in files[0].read_text()

    def test_repeat_setup_replaces_handlers(self):
        setup_logging(log_to_file=False)
        logger = setup_logging(log_to_file=False, level=logging.WARNING)
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
