"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

OUTLET_KINDS = ("html", "rss")

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class ScraperConfig(BaseModel):
    """Headline collection settings."""

    timeout: float = Field(10.0, description="Per-outlet request timeout in seconds", gt=0.0, le=120.0)
    max_concurrent: int = Field(10, description="Outlets fetched at the same time", ge=1, le=50)
    max_headlines_per_outlet: int = Field(10, description="Headlines kept per outlet", ge=1, le=100)
    user_agent: str = Field(
        DEFAULT_USER_AGENT,
        description="User-Agent header sent to outlets",
    )


class TrendingConfig(BaseModel):
    """Clustering, ranking and cache settings."""

    min_sources: int = Field(2, description="Outlets required for a trending story", ge=1)
    similarity_threshold: float = Field(0.35, description="Minimum headline similarity", ge=0.0, le=1.0)
    cache_ttl_minutes: int = Field(60, description="Minutes a cached result stays fresh", ge=0)


class OutletSelectors(BaseModel):
    """CSS selectors used to pull headlines from an outlet's front page."""

    headlines: str = Field(..., description="Selector for headline elements")
    links: str = Field("a", description="Selector for the link inside a headline element")
    title: str = Field("", description="Selector for the title inside a headline element")
    summary: str = Field("", description="Selector for the teaser text")


class OutletConfig(BaseModel):
    """Outlet configuration from outlets.yaml."""

    name: str = Field(..., description="Outlet name")
    url: str = Field(..., description="Front page or feed URL")
    kind: str = Field("html", description="Collection method (html, rss)")
    selectors: Optional[OutletSelectors] = Field(None, description="Selectors for html outlets")
    enabled: bool = Field(True, description="Whether the outlet is collected")

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, v: str) -> str:
        v = v.lower()
        if v not in OUTLET_KINDS:
            raise ValueError(f"kind must be one of {', '.join(OUTLET_KINDS)}, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_selectors(self) -> "OutletConfig":
        """HTML outlets cannot be scraped without selectors."""
        if self.kind == "html" and self.selectors is None:
            raise ValueError(f"Outlet {self.name!r} is an html outlet and needs selectors")
        return self


class ConfigModel(BaseModel):
    """Main configuration model."""

    workspace_root: str = Field("~/.newslens", description="Directory holding the cache file")
    cache_file: str = Field("trending-news.json", description="Cache file name inside the workspace")
    scraper: ScraperConfig = Field(default_factory=ScraperConfig)
    trending: TrendingConfig = Field(default_factory=TrendingConfig)
