"""File-based debug logging setup."""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FILENAME = 'flashdeck_debug.log'


def setup_file_logging(log_dir: Path) -> Path:
    """Configure file-based debug logging into *log_dir*."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILENAME
    root = logging.getLogger('fd')
    root.setLevel(logging.DEBUG)
    for existing in root.handlers:
        if isinstance(existing, logging.FileHandler) and existing.baseFilename == os.path.abspath(log_path):
            return log_path
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root.addHandler(handler)
    logging.getLogger('fd.cli').info('Debug logging started → %s', log_path)
    return log_path
