"""Data models for newslens."""

from .cluster import Cluster
from .headline import HeadlineRecord
from .story import Perspective, TrendingCache, TrendingStory

__all__ = ["Cluster", "HeadlineRecord", "Perspective", "TrendingCache", "TrendingStory"]
