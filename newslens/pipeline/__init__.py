"""Trending story pipeline."""

from .models import RefreshResult
from .service import TrendingService
from .stages import PipelineStage, print_stage_summary

__all__ = ["PipelineStage", "RefreshResult", "TrendingService", "print_stage_summary"]
