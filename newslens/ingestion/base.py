"""Outlet scraper interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from urllib.parse import urljoin

import httpx
import pendulum
from rich.console import Console

from ..config.models import DEFAULT_USER_AGENT, OutletConfig
from ..models import HeadlineRecord
from .models import CollectionResult

console = Console()


def absolute_link(href: str, base_url: str) -> str:
    """Resolve a possibly relative link against the outlet URL."""
    href = href.strip()
    if href.startswith("http"):
        return href
    return urljoin(base_url, href)


def collection_timestamp() -> str:
    return pendulum.now("UTC").to_iso8601_string()


class OutletScraper(ABC):
    """
    Fetch an outlet's document and extract headline records from it.

    Subclasses implement `extract`; `collect` wraps both steps so that a
    failing outlet yields an empty, unsuccessful result instead of raising.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize outlet scraper.

        Args:
            timeout: Request timeout in seconds, applied per outlet
            user_agent: User-Agent header value
            transport: Optional httpx transport (used by tests)
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

    async def fetch(self, outlet: OutletConfig) -> str:
        """Fetch the raw document for an outlet."""
        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
            transport=self.transport,
        ) as client:
            response = await client.get(outlet.url)
            response.raise_for_status()
            return response.text

    @abstractmethod
    def extract(self, document: str, outlet: OutletConfig) -> List[HeadlineRecord]:
        """
        Extract headline records from a fetched document.

        Args:
            document: Raw page or feed text
            outlet: Outlet the document came from

        Returns:
            Records in document order
        """
        pass

    def select(self, records: Iterable[HeadlineRecord], limit: int) -> List[HeadlineRecord]:
        """Drop repeated titles and keep at most `limit` records."""
        seen = set()
        kept: List[HeadlineRecord] = []
        for record in records:
            if record.title in seen:
                continue
            seen.add(record.title)
            kept.append(record)
            if len(kept) >= limit:
                break
        return kept

    def _failure(self, outlet: OutletConfig, error: str) -> CollectionResult:
        console.print(f"[yellow]Error collecting {outlet.name}: {error}[/yellow]")
        return CollectionResult(
            outlet_name=outlet.name,
            outlet_url=outlet.url,
            success=False,
            error=error,
        )

    async def collect(self, outlet: OutletConfig, limit: int = 10) -> CollectionResult:
        """Fetch and extract headlines for a single outlet."""
        try:
            document = await self.fetch(outlet)
            headlines = self.select(self.extract(document, outlet), limit)
        except httpx.HTTPStatusError as e:
            return self._failure(outlet, f"HTTP {e.response.status_code}")
        except httpx.TimeoutException:
            return self._failure(outlet, "Request timed out")
        except httpx.HTTPError as e:
            return self._failure(outlet, f"HTTP error: {e}")
        except Exception as e:
            return self._failure(outlet, f"Unexpected error: {e}")

        console.print(f"[dim]Collected {len(headlines)} headlines from {outlet.name}[/dim]")
        return CollectionResult(
            outlet_name=outlet.name,
            outlet_url=outlet.url,
            success=True,
            headlines=headlines,
            headline_count=len(headlines),
        )
