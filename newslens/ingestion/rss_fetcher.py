"""RSS feed scraper."""

from typing import List

import feedparser
from bs4 import BeautifulSoup

from ..config.models import OutletConfig
from ..models import HeadlineRecord
from .base import OutletScraper, absolute_link, collection_timestamp


def _strip_html(text: str) -> str:
    if not text:
        return ""
    return BeautifulSoup(text, "html.parser").get_text(" ", strip=True)


class RSSHeadlineScraper(OutletScraper):
    """Collect headlines from an outlet's RSS or Atom feed."""

    def extract(self, document: str, outlet: OutletConfig) -> List[HeadlineRecord]:
        """Turn feed entries into headline records."""
        feed = feedparser.parse(document)

        if feed.bozo and not feed.entries:
            raise ValueError(f"Invalid RSS feed: {feed.bozo_exception}")

        collected_at = collection_timestamp()
        records = []
        for entry in feed.entries:
            title = _strip_html(entry.get("title", ""))
            link = entry.get("link", "")
            if not title or not link:
                continue

            # Get description
            summary = entry.get("summary") or entry.get("description") or ""

            records.append(
                HeadlineRecord(
                    title=title,
                    summary=_strip_html(summary),
                    link=absolute_link(link, outlet.url),
                    source=outlet.name,
                    source_url=outlet.url,
                    timestamp=collected_at,
                )
            )

        return records
