"""Configuration defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from flashdeck.l1_entities.config import AppConfig
from flashdeck.l2_use_cases.export_use_case import DEFAULT_EXPORT_NAME
from flashdeck.l3_interface_adapters.gateways.paths import DEFAULT_SNAPSHOT_PATH
from flashdeck.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'storage': {
        'snapshot_file': str(DEFAULT_SNAPSHOT_PATH),
    },
    'export': {
        'filename': DEFAULT_EXPORT_NAME,
        'directory': '.',
    },
    'fetch': {
        'timeout': None,
        'follow_redirects': True,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
