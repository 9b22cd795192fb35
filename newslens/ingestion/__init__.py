"""Headline collection from news outlets."""

from .base import OutletScraper
from .collector import HeadlineCollector, flatten_results, print_collection_summary
from .html_scraper import HTMLHeadlineScraper
from .models import CollectionResult
from .rss_fetcher import RSSHeadlineScraper

__all__ = [
    "CollectionResult",
    "HTMLHeadlineScraper",
    "HeadlineCollector",
    "OutletScraper",
    "RSSHeadlineScraper",
    "flatten_results",
    "print_collection_summary",
]
