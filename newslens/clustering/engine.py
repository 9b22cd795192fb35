"""Greedy headline clustering."""

from typing import List, Optional, Sequence

from ..models import Cluster, HeadlineRecord
from .categorizer import Categorizer
from .similarity import JaccardTitleScorer, SimilarityScorer

DEFAULT_THRESHOLD = 0.35


class GreedyRepresentativeStrategy:
    """
    Assign-or-create over an ordered list of clusters.

    A record joins the first cluster, in creation order, whose first
    headline scores at or above the threshold against the record's title.
    Later members are never compared, so results depend on input order.
    """

    def __init__(
        self,
        scorer: SimilarityScorer,
        categorizer: Categorizer,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> None:
        self.scorer = scorer
        self.categorizer = categorizer
        self.threshold = threshold

    def find_cluster(self, record: HeadlineRecord, clusters: Sequence[Cluster]) -> Optional[Cluster]:
        for cluster in clusters:
            if self.scorer.score(record.title, cluster.representative.title) >= self.threshold:
                return cluster
        return None

    def assign(self, record: HeadlineRecord, clusters: List[Cluster]) -> Cluster:
        """Add the record to a matching cluster, or open a new one."""
        cluster = self.find_cluster(record, clusters)
        if cluster is not None:
            cluster.add(record)
            return cluster

        cluster = Cluster(record, self.categorizer.categorize(record.title, record.summary))
        clusters.append(cluster)
        return cluster


class ClusterEngine:
    """Group headline records into story clusters."""

    def __init__(
        self,
        threshold: float = DEFAULT_THRESHOLD,
        scorer: Optional[SimilarityScorer] = None,
        categorizer: Optional[Categorizer] = None,
    ) -> None:
        self.strategy = GreedyRepresentativeStrategy(
            scorer=scorer or JaccardTitleScorer(),
            categorizer=categorizer or Categorizer(),
            threshold=threshold,
        )

    @property
    def threshold(self) -> float:
        return self.strategy.threshold

    def cluster(self, headlines: Sequence[HeadlineRecord]) -> List[Cluster]:
        """Cluster headlines in input order; every record lands in exactly one cluster."""
        clusters: List[Cluster] = []
        for record in headlines:
            self.strategy.assign(record, clusters)
        return clusters


def cluster_headlines(
    headlines: Sequence[HeadlineRecord],
    threshold: float = DEFAULT_THRESHOLD,
) -> List[Cluster]:
    """Cluster headlines with the default scorer and categorizer."""
    return ClusterEngine(threshold=threshold).cluster(headlines)
