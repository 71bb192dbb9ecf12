"""Tests for YAML config loader gateway."""

from __future__ import annotations

from pathlib import Path

import pytest

from flashdeck.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader, deep_merge


class TestYamlConfigLoader:
    def test_load_raw_from_yaml(self, sample_config_yaml: Path):
        raw = YamlConfigLoader().load_raw(str(sample_config_yaml))
        assert raw['export']['filename'] == 'my_cards.csv'
        assert raw['fetch']['timeout'] == 12.5

    def test_load_nonexistent_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            YamlConfigLoader().load_raw(str(tmp_path / 'nonexistent.yaml'))

    def test_overrides_merge(self, sample_config_yaml: Path):
        raw = YamlConfigLoader().load_raw(
            str(sample_config_yaml),
            overrides={'export': {'directory': '/elsewhere'}},
        )
        assert raw['export']['directory'] == '/elsewhere'
        assert raw['export']['filename'] == 'my_cards.csv'

    def test_empty_yaml_is_empty_dict(self, tmp_path: Path):
        p = tmp_path / 'empty.yaml'
        p.write_text('', encoding='utf-8')
        assert YamlConfigLoader().load_raw(str(p)) == {}


class TestDefaultConfigResolution:
    def test_loads_from_default_config_dir(self, tmp_path: Path, monkeypatch):
        config_dir = tmp_path / 'flashdeck'
        config_dir.mkdir()
        (config_dir / 'config.yml').write_text('export:\n  filename: "x.csv"\n', encoding='utf-8')

        import flashdeck.l3_interface_adapters.gateways.yaml_config_loader as mod

        monkeypatch.setattr(mod, 'DEFAULT_CONFIG_PATHS', [config_dir / 'config.yaml', config_dir / 'config.yml'])

        assert YamlConfigLoader().load_raw() == {'export': {'filename': 'x.csv'}}

    def test_no_default_config_returns_empty(self, tmp_path: Path, monkeypatch):
        import flashdeck.l3_interface_adapters.gateways.yaml_config_loader as mod

        monkeypatch.setattr(mod, 'DEFAULT_CONFIG_PATHS', [tmp_path / 'nope' / 'config.yaml'])

        assert YamlConfigLoader().load_raw() == {}


class TestDeepMerge:
    def test_nested(self):
        base = {'a': {'b': 1, 'c': 2}, 'd': 3}
        deep_merge(base, {'a': {'b': 10}, 'e': 4})
        assert base == {'a': {'b': 10, 'c': 2}, 'd': 3, 'e': 4}
