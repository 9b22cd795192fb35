"""Shared test helpers."""

import pytest

from newslens.config import ConfigModel, save_config
from newslens.models import HeadlineRecord


def make_headline(title, source="BBC", summary="", link=None):
    return HeadlineRecord(
        title=title,
        summary=summary,
        link=link or f"https://example.com/{source.lower().replace(' ', '-')}/{abs(hash(title))}",
        source=source,
        source_url=f"https://example.com/{source.lower().replace(' ', '-')}",
        timestamp="2024-01-01T12:00:00Z",
    )


@pytest.fixture
def config_path(tmp_path):
    """Config file whose workspace lives under tmp_path."""
    path = tmp_path / "config" / "config.yaml"
    save_config(ConfigModel(workspace_root=str(tmp_path / "workspace")), path)
    return path
