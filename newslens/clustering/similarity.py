"""Headline similarity scoring."""

import re
from abc import ABC, abstractmethod
from typing import Set

_PUNCTUATION = re.compile(r"[^\w\s]")


def significant_words(text: str) -> Set[str]:
    """Lowercased, punctuation-free words longer than three characters."""
    cleaned = _PUNCTUATION.sub("", text.lower())
    return {word for word in cleaned.split() if len(word) > 3}


def similarity(a: str, b: str) -> float:
    """
    Jaccard similarity of two headlines' significant words.

    Texts with fewer than two significant words are not comparable and
    score 0.

    Args:
        a: First headline
        b: Second headline

    Returns:
        Score between 0.0 and 1.0
    """
    words_a = significant_words(a)
    words_b = significant_words(b)

    if len(words_a) < 2 or len(words_b) < 2:
        return 0.0

    return len(words_a & words_b) / len(words_a | words_b)


class SimilarityScorer(ABC):
    """Base class for headline similarity measures."""

    @abstractmethod
    def score(self, a: str, b: str) -> float:
        """
        Score two headlines from 0.0 to 1.0.

        Implementations must be symmetric.
        """
        pass


class JaccardTitleScorer(SimilarityScorer):
    """Word-set Jaccard similarity."""

    def score(self, a: str, b: str) -> float:
        return similarity(a, b)
