"""Tests for file logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from flashdeck.l4_frameworks_and_drivers.logging_setup import LOG_FILENAME, setup_file_logging


@pytest.fixture
def clean_fd_logger():
    root = logging.getLogger('fd')
    before = list(root.handlers)
    yield root
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()


class TestSetupFileLogging:
    def test_creates_log_file(self, tmp_path: Path, clean_fd_logger):
        path = setup_file_logging(tmp_path / 'data')
        logging.getLogger('fd.deck').info('hello from test')
        for handler in clean_fd_logger.handlers:
            handler.flush()
        assert path == tmp_path / 'data' / LOG_FILENAME
        assert 'hello from test' in path.read_text(encoding='utf-8')

    def test_idempotent(self, tmp_path: Path, clean_fd_logger):
        before = len(clean_fd_logger.handlers)
        setup_file_logging(tmp_path)
        setup_file_logging(tmp_path)
        assert len(clean_fd_logger.handlers) == before + 1
