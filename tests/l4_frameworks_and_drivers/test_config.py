"""Tests for L4 config defaults and build_app_config factory."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from flashdeck.l3_interface_adapters.gateways.paths import DEFAULT_SNAPSHOT_PATH
from flashdeck.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from flashdeck.l4_frameworks_and_drivers.infra_config import APP_CONFIG_DEFAULTS, build_app_config


class TestBuildAppConfig:
    def test_defaults_produce_valid_config(self):
        cfg = build_app_config({})
        assert cfg.storage.snapshot_file == str(DEFAULT_SNAPSHOT_PATH)
        assert cfg.export.filename == 'flashcards_export.csv'
        assert cfg.export.directory == '.'
        assert cfg.fetch.timeout is None
        assert cfg.fetch.follow_redirects is True

    def test_user_overrides_take_precedence(self):
        cfg = build_app_config({'export': {'directory': '/tmp/out'}, 'fetch': {'timeout': 5}})
        assert cfg.export.directory == '/tmp/out'
        assert cfg.export.filename == 'flashcards_export.csv'  # default preserved
        assert cfg.fetch.timeout == 5.0

    def test_defaults_not_mutated(self):
        build_app_config({'export': {'filename': 'other.csv'}})
        assert APP_CONFIG_DEFAULTS['export']['filename'] == 'flashcards_export.csv'

    def test_invalid_value_raises(self):
        with pytest.raises(ValidationError):
            build_app_config({'fetch': {'timeout': 'soon'}})

    def test_from_yaml_file(self, sample_config_yaml):
        cfg = build_app_config(YamlConfigLoader().load_raw(str(sample_config_yaml)))
        assert cfg.export.filename == 'my_cards.csv'
        assert cfg.fetch.timeout == 12.5
