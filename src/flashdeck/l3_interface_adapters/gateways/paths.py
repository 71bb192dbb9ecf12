"""Shared path constants for configuration and deck data."""

from __future__ import annotations

from platformdirs import user_config_path, user_data_path

CONFIG_DIR = user_config_path('flashdeck')
DATA_DIR = user_data_path('flashdeck')

DEFAULT_SNAPSHOT_PATH = DATA_DIR / 'deck.json'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
