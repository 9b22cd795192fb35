"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from newslens.config import (
    Config,
    ConfigModel,
    OutletConfig,
    OutletSelectors,
    create_default_outlets,
    load_config,
    load_outlets,
    save_config,
    save_outlets,
)


class TestConfigModel:
    def test_defaults(self):
        config = ConfigModel()

        assert config.trending.min_sources == 2
        assert config.trending.similarity_threshold == 0.35
        assert config.trending.cache_ttl_minutes == 60
        assert config.scraper.timeout == 10.0
        assert config.scraper.max_headlines_per_outlet == 10
        assert config.cache_file == "trending-news.json"

    def test_rejects_out_of_range_threshold(self):
        with pytest.raises(ValidationError):
            ConfigModel(trending={"similarity_threshold": 1.5})


class TestOutletConfig:
    def test_html_outlet_requires_selectors(self):
        with pytest.raises(ValidationError):
            OutletConfig(name="CNN", url="https://www.cnn.com")

    def test_rss_outlet_without_selectors(self):
        outlet = OutletConfig(name="Feed", url="https://example.com/rss", kind="RSS")
        assert outlet.kind == "rss"

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            OutletConfig(name="X", url="https://example.com", kind="api")

    def test_default_outlets(self):
        outlets = create_default_outlets()

        assert len(outlets) == 10
        assert outlets[0].name == "CNN"
        assert all(o.kind == "html" and o.selectors for o in outlets)


class TestLoader:
    def test_save_and_load_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        save_config(ConfigModel(workspace_root="/tmp/ws", trending={"min_sources": 3}), path)

        config = load_config(path)

        assert config.workspace_root == "/tmp/ws"
        assert config.trending.min_sources == 3

    def test_empty_config_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(path) == ConfigModel()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("trending: [unclosed")

        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("trending:\n  min_sources: 0\n")

        with pytest.raises(ValueError):
            load_config(path)

    def test_missing_config_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_outlets_round_trip(self, tmp_path):
        path = tmp_path / "outlets.yaml"
        outlets = [
            OutletConfig(name="Feed", url="https://example.com/rss", kind="rss"),
            OutletConfig(
                name="Page",
                url="https://example.com",
                selectors=OutletSelectors(headlines="h2", summary="p"),
            ),
        ]
        save_outlets(outlets, path)

        assert load_outlets(path) == outlets

    def test_invalid_outlets_are_skipped(self, tmp_path):
        path = tmp_path / "outlets.yaml"
        path.write_text(
            "outlets:\n"
            "  - name: Feed\n"
            "    url: https://example.com/rss\n"
            "    kind: rss\n"
            "  - name: Broken\n"
            "    url: https://example.com\n"
        )

        assert [o.name for o in load_outlets(path)] == ["Feed"]


class TestConfigManager:
    def test_defaults_without_file(self, tmp_path):
        config = Config(tmp_path / "missing" / "config.yaml")

        assert config.config == ConfigModel()
        assert len(config.get_outlets()) == 10

    def test_outlets_file_overrides_defaults(self, tmp_path):
        config = Config(tmp_path / "config.yaml")
        save_outlets([OutletConfig(name="Feed", url="https://example.com/rss", kind="rss")], config.outlets_path)

        assert [o.name for o in config.get_outlets()] == ["Feed"]

    def test_cache_path_inside_workspace(self, config_path, tmp_path):
        config = Config(config_path)

        assert config.cache_path == tmp_path / "workspace" / "trending-news.json"
        assert (tmp_path / "workspace").is_dir()

    def test_config_path_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("NEWSLENS_CONFIG", str(tmp_path / "custom.yaml"))

        assert Config().config_path == Path(tmp_path / "custom.yaml")
