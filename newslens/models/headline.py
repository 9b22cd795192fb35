"""Headline record collected from a single outlet."""

from pydantic import Field

from .base import RecordModel


class HeadlineRecord(RecordModel):
    """Headline model."""

    title: str = Field(..., description="Headline text")
    summary: str = Field("", description="Teaser text, may be empty")
    link: str = Field(..., description="Absolute URL of the article")
    source: str = Field(..., description="Outlet name")
    source_url: str = Field(..., alias="sourceUrl", description="Outlet URL the headline was collected from")
    timestamp: str = Field(..., description="ISO-8601 collection time")
