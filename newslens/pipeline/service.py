"""Trending story service: cache gate in front of the collect, cluster, rank pipeline."""

import asyncio
from typing import List, Optional, Sequence

import pendulum
from rich.console import Console

from ..cache import TrendingCacheStore, cache_age_minutes, is_fresh
from ..clustering import CATEGORIES, ClusterEngine
from ..config import Config, OutletConfig
from ..ingestion import HeadlineCollector, flatten_results
from ..models import TrendingCache, TrendingStory
from ..ranking import TrendingRanker, print_ranking_summary
from .models import RefreshResult
from .stages import PipelineStage, create_stages

console = Console()


def filter_by_category(stories: Sequence[TrendingStory], category: Optional[str]) -> List[TrendingStory]:
    """Exact category match; empty or "all" keeps everything."""
    if not category or category == "all":
        return list(stories)
    return [story for story in stories if story.category == category]


class TrendingService:
    """Serve trending stories, refreshing the cache when it goes stale."""

    categories = CATEGORIES

    def __init__(
        self,
        config: Config,
        collector: Optional[HeadlineCollector] = None,
        store: Optional[TrendingCacheStore] = None,
        outlets: Optional[Sequence[OutletConfig]] = None,
    ) -> None:
        """
        Initialize trending service.

        Args:
            config: Configuration manager
            collector: Headline collector (default: built from scraper config)
            store: Cache store (default: file at the configured cache path)
            outlets: Outlets to collect (default: configured outlets)
        """
        self.config = config
        self.collector = collector or HeadlineCollector.from_config(config.config.scraper)
        self.store = store or TrendingCacheStore(config.cache_path)
        self._outlets = list(outlets) if outlets is not None else None
        self.stages: List[PipelineStage] = create_stages()

    @property
    def outlets(self) -> List[OutletConfig]:
        if self._outlets is None:
            self._outlets = self.config.get_outlets()
        return self._outlets

    async def run_pipeline(self, min_sources: int) -> List[TrendingStory]:
        """
        Collect, cluster and rank, then replace the cache.

        Errors raised while clustering or ranking propagate to the caller.
        """
        trending_config = self.config.config.trending
        self.stages = create_stages()
        collect_stage, cluster_stage, rank_stage, cache_stage = self.stages

        collect_stage.start()
        results = await self.collector.collect_all(self.outlets)
        headlines = flatten_results(results)
        collect_stage.complete({
            "total_outlets": len(results),
            "successful_outlets": sum(1 for r in results if r.success),
            "total_headlines": len(headlines),
        })
        console.print(f"Collected {len(headlines)} total headlines from {len(results)} outlets")

        cluster_stage.start()
        try:
            clusters = ClusterEngine(threshold=trending_config.similarity_threshold).cluster(headlines)
        except Exception as e:
            cluster_stage.fail(str(e))
            raise
        cluster_stage.complete({"clusters": len(clusters)})
        console.print(f"Formed {len(clusters)} clusters of similar headlines")

        rank_stage.start()
        try:
            ranking = TrendingRanker(min_sources=min_sources).rank(clusters)
        except Exception as e:
            rank_stage.fail(str(e))
            raise
        stories = ranking.stories
        rank_stage.complete({"stories": len(stories), "min_sources": min_sources})
        print_ranking_summary(ranking)

        cache_stage.start()
        cache = TrendingCache(stories=stories, last_updated=pendulum.now("UTC").to_iso8601_string())
        written = self.store.write(cache)
        cache_stage.complete({"written": written, "last_updated": cache.last_updated})

        return stories

    async def get_trending_stories(
        self,
        min_sources: Optional[int] = None,
        category: Optional[str] = None,
        force_refresh: bool = False,
    ) -> List[TrendingStory]:
        """
        Get trending stories, served from cache while it is fresh.

        Args:
            min_sources: Minimum outlets per story (default: configured value)
            category: Exact category to keep; None or "all" keeps everything
            force_refresh: Ignore the cache and run the pipeline

        Returns:
            Trending stories sorted by source count
        """
        trending_config = self.config.config.trending
        if min_sources is None:
            min_sources = trending_config.min_sources

        if not force_refresh:
            cache = self.store.read()
            if is_fresh(cache, trending_config.cache_ttl_minutes):
                age = cache_age_minutes(cache)
                console.print(f"[dim]Using cached trending stories ({age / 60:.2f} hours old)[/dim]")
                return filter_by_category(cache.stories, category)

        stories = await self.run_pipeline(min_sources)
        return filter_by_category(stories, category)

    def get_trending_story_by_id(self, story_id: str) -> Optional[TrendingStory]:
        """Look up a story in the current cache; never triggers a refresh."""
        return self.store.find(story_id)

    async def refresh_trending_stories(self) -> RefreshResult:
        """Force a full refresh of the cache."""
        try:
            stories = await self.get_trending_stories(force_refresh=True)
        except Exception as e:
            console.print(f"[red]Error refreshing trending stories: {e}[/red]")
            return RefreshResult(
                success=False,
                error=str(e),
                message="Failed to refresh trending stories",
            )

        return RefreshResult(
            success=True,
            count=len(stories),
            message="Trending stories refreshed successfully",
        )

    def get_trending_stories_sync(
        self,
        min_sources: Optional[int] = None,
        category: Optional[str] = None,
        force_refresh: bool = False,
    ) -> List[TrendingStory]:
        """Synchronous wrapper for get_trending_stories."""
        return asyncio.run(self.get_trending_stories(min_sources, category, force_refresh))

    def refresh_trending_stories_sync(self) -> RefreshResult:
        """Synchronous wrapper for refresh_trending_stories."""
        return asyncio.run(self.refresh_trending_stories())
