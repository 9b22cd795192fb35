"""Data models for ingestion."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import HeadlineRecord


class CollectionResult(BaseModel):
    """Result of collecting headlines from one outlet."""

    outlet_name: str = Field(..., description="Outlet name")
    outlet_url: str = Field(..., description="Outlet URL")
    success: bool = Field(..., description="Whether collection succeeded")
    headlines: List[HeadlineRecord] = Field(default_factory=list, description="Collected headlines")
    error: Optional[str] = Field(None, description="Error message if failed")
    headline_count: int = Field(0, description="Number of headlines collected")
