"""Tests for the command line interface."""

import json

import pendulum
import pytest
from typer.testing import CliRunner

from newslens.cli.app import app
from newslens.config import load_config, load_outlets
from newslens.config.loader import Config
from newslens.models import Perspective, TrendingStory

runner = CliRunner()


@pytest.fixture
def env(config_path):
    return {"NEWSLENS_CONFIG": str(config_path)}


@pytest.fixture
def cached_story(config_path):
    story = TrendingStory(
        id="trending-1704067200000-0",
        title="Senate passes sweeping climate bill",
        summary="Lawmakers vote after a marathon debate",
        category="environment",
        source_count=2,
        sources=["BBC", "CNN"],
        perspectives=[
            Perspective(source="BBC", title="Senate passes climate bill", link="https://bbc.com/1"),
            Perspective(source="CNN", title="Climate bill clears Senate", link="https://cnn.com/1"),
        ],
    )
    cache_path = Config(config_path).cache_path
    cache_path.write_text(json.dumps({
        "stories": [story.to_json_dict()],
        "lastUpdated": pendulum.now("UTC").to_iso8601_string(),
    }))
    return story


def test_categories():
    result = runner.invoke(app, ["trending", "categories"])

    assert result.exit_code == 0
    assert result.output.split() == ["politics", "technology", "business", "health", "environment", "general"]


def test_init_writes_config_and_outlets(tmp_path):
    config_dir = tmp_path / "config"
    workspace = tmp_path / "workspace"

    result = runner.invoke(
        app,
        ["init", "--config-dir", str(config_dir), "--workspace", str(workspace), "--min-sources", "3"],
    )

    assert result.exit_code == 0
    assert load_config(config_dir / "config.yaml").trending.min_sources == 3
    assert len(load_outlets(config_dir / "outlets.yaml")) == 10
    assert workspace.is_dir()


def test_init_without_outlets(tmp_path):
    config_dir = tmp_path / "config"

    result = runner.invoke(
        app,
        ["init", "--config-dir", str(config_dir), "--workspace", str(tmp_path / "ws"), "--no-seed-outlets"],
    )

    assert result.exit_code == 0
    assert load_outlets(config_dir / "outlets.yaml") == []


def test_list_serves_fresh_cache(env, cached_story):
    result = runner.invoke(app, ["trending", "list", "--json"], env=env)

    assert result.exit_code == 0
    assert cached_story.id in result.output


def test_list_rejects_unknown_category(env):
    result = runner.invoke(app, ["trending", "list", "--category", "sports"], env=env)

    assert result.exit_code == 1


def test_show_story(env, cached_story):
    result = runner.invoke(app, ["trending", "show", cached_story.id, "--json"], env=env)

    assert result.exit_code == 0
    assert "Climate bill clears Senate" in result.output


def test_show_unknown_story(env):
    result = runner.invoke(app, ["trending", "show", "trending-0-0"], env=env)

    assert result.exit_code == 1


def test_outlets_add_and_remove(env, config_path):
    outlets_path = config_path.parent / "outlets.yaml"

    result = runner.invoke(
        app,
        ["outlets", "add", "--name", "Example Feed", "--url", "https://example.com/rss", "--kind", "rss"],
        env=env,
    )
    assert result.exit_code == 0
    names = [o.name for o in load_outlets(outlets_path)]
    assert len(names) == 11
    assert names[-1] == "Example Feed"

    result = runner.invoke(app, ["outlets", "remove", "BBC"], env=env)
    assert result.exit_code == 0
    assert "BBC" not in [o.name for o in load_outlets(outlets_path)]


def test_outlets_add_html_requires_selectors(env):
    result = runner.invoke(
        app,
        ["outlets", "add", "--name", "Page", "--url", "https://example.com"],
        env=env,
    )

    assert result.exit_code == 1


def test_outlets_add_duplicate(env):
    result = runner.invoke(
        app,
        ["outlets", "add", "--name", "BBC", "--url", "https://example.com/rss", "--kind", "rss"],
        env=env,
    )

    assert result.exit_code == 1


def test_outlets_remove_unknown(env):
    result = runner.invoke(app, ["outlets", "remove", "Nobody"], env=env)

    assert result.exit_code == 1
