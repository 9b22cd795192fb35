"""Trending story ranking."""

from .models import RankingResult
from .ranker import TrendingRanker, make_story_id, print_ranking_summary

__all__ = ["RankingResult", "TrendingRanker", "make_story_id", "print_ranking_summary"]
