"""Ranking models."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from ..models import TrendingStory


class RankingResult(BaseModel):
    """Result of ranking clusters."""

    total_clusters: int = Field(..., description="Clusters considered")
    stories: List[TrendingStory] = Field(..., description="Trending stories, highest coverage first")
    min_sources: int = Field(..., description="Minimum outlets required")
    ranking_timestamp: datetime = Field(..., description="When ranking was performed")
