"""Tests for trending story ranking."""

from datetime import datetime, timezone

import pytest

from newslens.clustering import cluster_headlines
from newslens.models import Cluster
from newslens.ranking import TrendingRanker, make_story_id

from conftest import make_headline

GENERATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_cluster(title, sources, category="general"):
    first = make_headline(title, sources[0], summary=f"{title} summary")
    cluster = Cluster(first, category)
    for source in sources[1:]:
        cluster.add(make_headline(title, source))
    return cluster


class TestTrendingRanker:
    def test_min_sources_filter(self):
        clusters = cluster_headlines([
            make_headline("Senate passes sweeping climate bill after marathon debate", "BBC"),
            make_headline("Senate passes sweeping climate bill", "CNN"),
            make_headline("Sweeping climate bill passes Senate after debate", "NPR"),
        ])

        assert len(TrendingRanker(min_sources=2).rank(clusters).stories) == 1
        assert TrendingRanker(min_sources=4).rank(clusters).stories == []

    def test_sorted_by_source_count_with_stable_ties(self):
        clusters = [
            make_cluster("Story one", ["BBC", "CNN"]),
            make_cluster("Story two", ["BBC", "CNN", "NPR"]),
            make_cluster("Story three", ["NPR", "CNBC"]),
            make_cluster("Story four", ["BBC"]),
        ]

        stories = TrendingRanker(min_sources=2).rank(clusters, generated_at=GENERATED_AT).stories

        assert [s.title for s in stories] == ["Story two", "Story one", "Story three"]
        assert [s.source_count for s in stories] == [3, 2, 2]

    def test_ids_use_generation_time_and_position(self):
        clusters = [
            make_cluster("Story one", ["BBC", "CNN"]),
            make_cluster("Story two", ["BBC", "CNN", "NPR"]),
        ]

        stories = TrendingRanker().rank(clusters, generated_at=GENERATED_AT).stories

        assert [s.id for s in stories] == ["trending-1704067200000-0", "trending-1704067200000-1"]
        assert make_story_id(GENERATED_AT, 5) == "trending-1704067200000-5"

    def test_story_fields_follow_cluster(self):
        cluster = make_cluster("Story one", ["BBC", "CNN", "BBC"], category="politics")

        story = TrendingRanker().rank([cluster], generated_at=GENERATED_AT).stories[0]

        assert story.summary == "Story one summary"
        assert story.category == "politics"
        assert story.source_count == 2
        assert story.sources == ["BBC", "CNN"]
        assert len(story.perspectives) == len(cluster.headlines) == 3
        assert [p.source for p in story.perspectives] == ["BBC", "CNN", "BBC"]
        assert story.perspectives[0].link == cluster.headlines[0].link

    def test_result_metadata(self):
        clusters = [make_cluster("Story one", ["BBC", "CNN"]), make_cluster("Story two", ["BBC"])]

        result = TrendingRanker(min_sources=2).rank(clusters, generated_at=GENERATED_AT)

        assert result.total_clusters == 2
        assert result.min_sources == 2
        assert result.ranking_timestamp == GENERATED_AT

    def test_rejects_non_positive_min_sources(self):
        with pytest.raises(ValueError):
            TrendingRanker(min_sources=0)
