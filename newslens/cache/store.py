"""JSON file store for the trending story cache."""

import json
from pathlib import Path
from typing import Optional

import pendulum
from pydantic import ValidationError
from rich.console import Console

from ..models import TrendingCache, TrendingStory

console = Console()


def cache_age_minutes(cache: TrendingCache, now: Optional[pendulum.DateTime] = None) -> Optional[float]:
    """Minutes since the cache was written, None when the timestamp is unusable."""
    if not cache.last_updated:
        return None
    try:
        last_updated = pendulum.parse(cache.last_updated)
    except ValueError:
        return None
    if not isinstance(last_updated, pendulum.DateTime):
        return None

    now = now or pendulum.now("UTC")
    return (now - last_updated).total_seconds() / 60


def is_fresh(cache: TrendingCache, ttl_minutes: float, now: Optional[pendulum.DateTime] = None) -> bool:
    """Whether a non-empty cache is younger than the TTL."""
    if cache.is_empty:
        return False
    age = cache_age_minutes(cache, now)
    return age is not None and age < ttl_minutes


class TrendingCacheStore:
    """
    Read and replace the single cached trending document.

    The document is always replaced as a whole; there is no merging and no
    locking, so concurrent writers race and the last one wins.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def read(self) -> TrendingCache:
        """Read the cache. Missing or unreadable documents read as empty."""
        if not self.path.exists():
            return TrendingCache()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return TrendingCache.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            console.print(f"[yellow]Error reading trending cache {self.path}: {e}[/yellow]")
            return TrendingCache()

    def write(self, cache: TrendingCache) -> bool:
        """Write the cache document. Failures are reported, not raised."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(cache.to_json_dict(), indent=2), encoding="utf-8")
        except (OSError, TypeError) as e:
            console.print(f"[red]Error saving trending cache {self.path}: {e}[/red]")
            return False

        console.print(f"[dim]Updated trending stories cache ({len(cache.stories)} stories)[/dim]")
        return True

    def find(self, story_id: str) -> Optional[TrendingStory]:
        """Look up a story in the persisted cache."""
        for story in self.read().stories:
            if story.id == story_id:
                return story
        return None
