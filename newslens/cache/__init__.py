"""Persisted trending story cache."""

from .store import TrendingCacheStore, cache_age_minutes, is_fresh

__all__ = ["TrendingCacheStore", "cache_age_minutes", "is_fresh"]
