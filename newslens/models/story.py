"""Trending story models and the persisted cache document."""

from typing import List, Optional

from pydantic import Field

from .base import RecordModel


class Perspective(RecordModel):
    """One outlet's take on a trending story."""

    source: str = Field(..., description="Outlet name")
    title: str = Field(..., description="Outlet headline")
    summary: str = Field("", description="Outlet teaser text")
    link: str = Field(..., description="Article URL")


class TrendingStory(RecordModel):
    """Story covered by multiple outlets."""

    id: str = Field(..., description="Identifier, unique within one cache generation")
    title: str = Field(..., description="Representative headline")
    summary: str = Field("", description="Summary of the first headline")
    category: str = Field(..., description="Topic label")
    source_count: int = Field(..., alias="sourceCount", ge=1, description="Distinct outlets covering the story")
    sources: List[str] = Field(default_factory=list, description="Distinct outlet names")
    perspectives: List[Perspective] = Field(default_factory=list, description="One entry per clustered headline")


class TrendingCache(RecordModel):
    """Cached result of the latest pipeline run."""

    stories: List[TrendingStory] = Field(default_factory=list)
    last_updated: Optional[str] = Field(None, alias="lastUpdated", description="ISO-8601 time of the refresh")

    @property
    def is_empty(self) -> bool:
        return not self.stories
