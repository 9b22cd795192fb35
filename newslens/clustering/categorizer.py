"""Keyword based topic classification."""

from typing import List, Sequence, Tuple

CATEGORIES = ["politics", "technology", "business", "health", "environment", "general"]

DEFAULT_CATEGORY = "general"

# Checked in order, first group with any match wins.
KEYWORD_GROUPS: List[Tuple[str, Tuple[str, ...]]] = [
    ("technology", ("tech", "ai", "robot", "computer", "software", "digital", "quantum", "cyber")),
    (
        "environment",
        (
            "climate",
            "environment",
            "renewable",
            "carbon",
            "emission",
            "sustainable",
            "green energy",
            "biodiversity",
        ),
    ),
    (
        "politics",
        (
            "politic",
            "government",
            "election",
            "president",
            "congress",
            "senate",
            "democrat",
            "republican",
        ),
    ),
    (
        "health",
        ("health", "medical", "disease", "doctor", "patient", "hospital", "treatment", "vaccine"),
    ),
    (
        "business",
        ("business", "economy", "market", "stock", "investor", "company", "financial", "trade"),
    ),
]


class Categorizer:
    """Assign a topic label to a headline.

    Keywords are plain substrings, so "ai" also matches inside longer
    words. The group order is the tie-break: a text matching both
    technology and environment keywords is technology.
    """

    def __init__(
        self,
        groups: Sequence[Tuple[str, Sequence[str]]] = KEYWORD_GROUPS,
        default: str = DEFAULT_CATEGORY,
    ) -> None:
        self.groups = [(label, tuple(k.lower() for k in keywords)) for label, keywords in groups]
        self.default = default

    def categorize(self, headline: str, summary: str = "") -> str:
        text = f"{headline} {summary or ''}".lower()
        for label, keywords in self.groups:
            if any(keyword in text for keyword in keywords):
                return label
        return self.default


_default_categorizer = Categorizer()


def categorize(headline: str, summary: str = "") -> str:
    """Categorize with the built-in keyword groups."""
    return _default_categorizer.categorize(headline, summary)
