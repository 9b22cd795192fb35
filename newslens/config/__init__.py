"""Configuration management for newslens."""

from .loader import Config, load_config, load_outlets, save_config, save_outlets
from .models import (
    ConfigModel,
    OutletConfig,
    OutletSelectors,
    ScraperConfig,
    TrendingConfig,
)
from .outlets import create_default_outlets

__all__ = [
    "Config",
    "ConfigModel",
    "OutletConfig",
    "OutletSelectors",
    "ScraperConfig",
    "TrendingConfig",
    "create_default_outlets",
    "load_config",
    "load_outlets",
    "save_config",
    "save_outlets",
]
