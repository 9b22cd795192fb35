"""Cluster accumulator for grouping similar headlines."""

from typing import Dict, List

from .headline import HeadlineRecord


def title_score(title: str) -> int:
    """Score a title by length, penalizing very short and very long ones."""
    length = len(title)
    if length < 20:
        return length
    if length > 100:
        return 200 - length
    return length


class Cluster:
    """Headlines judged to describe the same story.

    Headlines and sources only ever grow. The category is fixed when the
    cluster is opened and is not recomputed for later members.
    """

    def __init__(self, first: HeadlineRecord, category: str) -> None:
        self.headlines: List[HeadlineRecord] = [first]
        self.category = category
        # dict keeps insertion order of distinct outlet names
        self._sources: Dict[str, None] = {first.source: None}

    @property
    def representative(self) -> HeadlineRecord:
        """First headline added; used for all similarity comparisons."""
        return self.headlines[0]

    @property
    def sources(self) -> List[str]:
        return list(self._sources)

    @property
    def source_count(self) -> int:
        return len(self._sources)

    @property
    def title(self) -> str:
        """Most informative headline title in the cluster."""
        # max() returns the first maximal element, so ties keep discovery order
        best = max(self.headlines, key=lambda h: title_score(h.title))
        return best.title

    def add(self, record: HeadlineRecord) -> None:
        self.headlines.append(record)
        self._sources.setdefault(record.source, None)

    def __len__(self) -> int:
        return len(self.headlines)

    def __repr__(self) -> str:
        return (
            f"Cluster(category={self.category!r}, headlines={len(self.headlines)}, "
            f"sources={self.sources!r})"
        )
