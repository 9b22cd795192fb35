"""Front page scraper driven by CSS selectors."""

from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ..config.models import OutletConfig, OutletSelectors
from ..models import HeadlineRecord
from .base import OutletScraper, absolute_link, collection_timestamp

SUMMARY_CLASSES = {"summary", "description"}


def _text(node: Optional[Tag]) -> str:
    if node is None:
        return ""
    return node.get_text(" ", strip=True)


class HTMLHeadlineScraper(OutletScraper):
    """Scrape headlines from an outlet's HTML front page."""

    def _title(self, element: Tag, selectors: OutletSelectors) -> str:
        if selectors.title:
            return _text(element.select_one(selectors.title))
        return _text(element)

    def _summary(self, element: Tag, selectors: OutletSelectors) -> str:
        if not selectors.summary:
            return ""

        node = element.select_one(selectors.summary)
        if node is not None:
            return _text(node)

        # Teaser text often sits right after the headline element
        sibling = element.find_next_sibling()
        if sibling is not None:
            classes = set(sibling.get("class") or [])
            if sibling.name == "p" or classes & SUMMARY_CLASSES:
                return _text(sibling)
        return ""

    def _link(self, element: Tag, selectors: OutletSelectors) -> str:
        anchor = element.select_one(selectors.links) if selectors.links else None
        if anchor is not None and anchor.name != "a":
            anchor = anchor.find("a")
        if anchor is None:
            anchor = element if element.name == "a" else element.find_parent("a")
        if anchor is None:
            return ""
        return anchor.get("href") or ""

    def extract(self, document: str, outlet: OutletConfig) -> List[HeadlineRecord]:
        """Extract headline records using the outlet's selectors."""
        if outlet.selectors is None:
            raise ValueError(f"Outlet {outlet.name} has no selectors")

        selectors = outlet.selectors
        soup = BeautifulSoup(document, "html.parser")
        collected_at = collection_timestamp()

        records = []
        for element in soup.select(selectors.headlines):
            title = self._title(element, selectors)
            link = self._link(element, selectors)
            if not title or not link:
                continue

            records.append(
                HeadlineRecord(
                    title=title,
                    summary=self._summary(element, selectors),
                    link=absolute_link(link, outlet.url),
                    source=outlet.name,
                    source_url=outlet.url,
                    timestamp=collected_at,
                )
            )

        return records
