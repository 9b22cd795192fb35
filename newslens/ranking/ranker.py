"""Rank clusters into trending stories by cross-source coverage."""

from datetime import datetime
from typing import List, Optional, Sequence

import pendulum
from rich.console import Console

from ..models import Cluster, Perspective, TrendingStory
from .models import RankingResult

console = Console()


def make_story_id(generated_at: datetime, position: int) -> str:
    """Build a story id from the generation time and ordinal position."""
    return f"trending-{int(generated_at.timestamp() * 1000)}-{position}"


class TrendingRanker:
    """Filter and order clusters by the number of outlets covering them."""

    def __init__(self, min_sources: int = 2) -> None:
        """
        Initialize trending ranker.

        Args:
            min_sources: Minimum distinct outlets a cluster needs to trend
        """
        if min_sources < 1:
            raise ValueError(f"min_sources must be at least 1, got {min_sources}")
        self.min_sources = min_sources

    def to_story(self, cluster: Cluster, story_id: str) -> TrendingStory:
        """Map a finalized cluster into a trending story."""
        return TrendingStory(
            id=story_id,
            title=cluster.title,
            summary=cluster.representative.summary or "",
            category=cluster.category,
            source_count=cluster.source_count,
            sources=cluster.sources,
            perspectives=[
                Perspective(source=h.source, title=h.title, summary=h.summary, link=h.link)
                for h in cluster.headlines
            ],
        )

    def rank(
        self,
        clusters: Sequence[Cluster],
        generated_at: Optional[datetime] = None,
    ) -> RankingResult:
        """
        Rank clusters.

        Args:
            clusters: Clusters in discovery order
            generated_at: Generation time used in story ids (default: now)

        Returns:
            Ranking result with stories sorted by source count descending
        """
        if generated_at is None:
            generated_at = pendulum.now("UTC")

        eligible = [c for c in clusters if c.source_count >= self.min_sources]
        # sorted() is stable, equal coverage keeps discovery order
        eligible = sorted(eligible, key=lambda c: c.source_count, reverse=True)

        stories = [
            self.to_story(cluster, make_story_id(generated_at, index))
            for index, cluster in enumerate(eligible)
        ]

        return RankingResult(
            total_clusters=len(clusters),
            stories=stories,
            min_sources=self.min_sources,
            ranking_timestamp=generated_at,
        )

    def rank_stories(self, clusters: Sequence[Cluster]) -> List[TrendingStory]:
        """Rank clusters and return only the stories."""
        return self.rank(clusters).stories


def print_ranking_summary(result: RankingResult) -> None:
    """Print ranking summary."""
    console.print(f"\n[bold]Ranking Summary:[/bold]")
    console.print(f"  Clusters considered: {result.total_clusters}")
    console.print(f"  Trending stories (>= {result.min_sources} sources): {len(result.stories)}")

    if result.stories:
        console.print(f"\n[bold]Top Stories:[/bold]")
        for i, story in enumerate(result.stories[:10], 1):
            console.print(f"{i}. [yellow]{story.title}[/yellow]")
            console.print(
                f"   {story.source_count} sources ({', '.join(story.sources)}) - {story.category}"
            )
