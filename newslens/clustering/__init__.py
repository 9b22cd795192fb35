"""Headline similarity, categorization and clustering."""

from .categorizer import CATEGORIES, Categorizer, categorize
from .engine import ClusterEngine, GreedyRepresentativeStrategy, cluster_headlines
from .similarity import JaccardTitleScorer, SimilarityScorer, significant_words, similarity

__all__ = [
    "CATEGORIES",
    "Categorizer",
    "ClusterEngine",
    "GreedyRepresentativeStrategy",
    "JaccardTitleScorer",
    "SimilarityScorer",
    "categorize",
    "cluster_headlines",
    "significant_words",
    "similarity",
]
