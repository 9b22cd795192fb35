"""Concurrent headline collection across outlets."""

import asyncio
from typing import Dict, List, Optional, Sequence

import httpx
from rich.console import Console

from ..config.models import DEFAULT_USER_AGENT, OutletConfig, ScraperConfig
from ..models import HeadlineRecord
from .base import OutletScraper
from .html_scraper import HTMLHeadlineScraper
from .models import CollectionResult
from .rss_fetcher import RSSHeadlineScraper

console = Console()


class HeadlineCollector:
    """Collect headlines from every configured outlet."""

    def __init__(
        self,
        timeout: float = 10.0,
        max_concurrent: int = 10,
        max_headlines_per_outlet: int = 10,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize headline collector."""
        self.max_concurrent = max_concurrent
        self.max_headlines_per_outlet = max_headlines_per_outlet
        self.scrapers: Dict[str, OutletScraper] = {
            "html": HTMLHeadlineScraper(timeout=timeout, user_agent=user_agent, transport=transport),
            "rss": RSSHeadlineScraper(timeout=timeout, user_agent=user_agent, transport=transport),
        }

    @classmethod
    def from_config(
        cls,
        config: ScraperConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "HeadlineCollector":
        return cls(
            timeout=config.timeout,
            max_concurrent=config.max_concurrent,
            max_headlines_per_outlet=config.max_headlines_per_outlet,
            user_agent=config.user_agent,
            transport=transport,
        )

    async def collect_outlet(self, outlet: OutletConfig) -> CollectionResult:
        """Collect one outlet; never raises."""
        scraper = self.scrapers[outlet.kind]
        return await scraper.collect(outlet, limit=self.max_headlines_per_outlet)

    async def collect(self, outlet: OutletConfig) -> List[HeadlineRecord]:
        """Collect one outlet's headlines, empty on failure."""
        result = await self.collect_outlet(outlet)
        return result.headlines

    async def collect_all(self, outlets: Sequence[OutletConfig]) -> List[CollectionResult]:
        """Collect all enabled outlets concurrently, results in configuration order."""
        enabled_outlets = [o for o in outlets if o.enabled]

        if not enabled_outlets:
            return []

        semaphore = asyncio.Semaphore(self.max_concurrent)

        async def collect_with_semaphore(outlet: OutletConfig) -> CollectionResult:
            async with semaphore:
                return await self.collect_outlet(outlet)

        tasks = [collect_with_semaphore(outlet) for outlet in enabled_outlets]
        return list(await asyncio.gather(*tasks))

    def collect_all_sync(self, outlets: Sequence[OutletConfig]) -> List[CollectionResult]:
        """Synchronous wrapper for collect_all."""
        return asyncio.run(self.collect_all(outlets))


def flatten_results(results: Sequence[CollectionResult]) -> List[HeadlineRecord]:
    """Concatenate headlines outlet by outlet, keeping scrape order."""
    return [headline for result in results for headline in result.headlines]


def print_collection_summary(results: Sequence[CollectionResult]) -> None:
    """Print summary of headline collection results."""
    total_headlines = sum(r.headline_count for r in results)
    successful = sum(1 for r in results if r.success)
    failed = len(results) - successful

    console.print(f"\n[bold]Headline Collection Summary:[/bold]")
    console.print(f"  Outlets collected: {len(results)}")
    console.print(f"  Successful: [green]{successful}[/green]")
    console.print(f"  Failed: [red]{failed}[/red]")
    console.print(f"  Total headlines: {total_headlines}")

    if failed > 0:
        console.print(f"\n[bold red]Failed outlets:[/bold red]")
        for result in results:
            if not result.success:
                console.print(f"  - {result.outlet_name}: {result.error}")
