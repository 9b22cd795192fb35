"""Configuration loader."""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError
from rich.console import Console

from .models import ConfigModel, OutletConfig
from .outlets import create_default_outlets

console = Console()

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "newslens"
CONFIG_ENV = "NEWSLENS_CONFIG"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            env_path = os.environ.get(CONFIG_ENV)
            config_path = Path(env_path).expanduser() if env_path else DEFAULT_CONFIG_DIR / "config.yaml"
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults when no file exists."""
        if self._config is None:
            if self.config_path.exists():
                self._config = load_config(self.config_path)
            else:
                self._config = ConfigModel()
        return self._config

    @property
    def outlets_path(self) -> Path:
        return self.config_path.parent / "outlets.yaml"

    @property
    def workspace_root(self) -> Path:
        """Get workspace root path."""
        path = Path(self.config.workspace_root).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def cache_path(self) -> Path:
        """Get the trending cache document path."""
        return self.workspace_root / self.config.cache_file

    def get_outlets(self) -> List[OutletConfig]:
        """Get configured outlets; the built-in list unless outlets.yaml exists."""
        if self.outlets_path.exists():
            return load_outlets(self.outlets_path)
        return create_default_outlets()


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def load_outlets(outlets_path: Path) -> List[OutletConfig]:
    """Load outlets from YAML file."""
    if not outlets_path.exists():
        raise FileNotFoundError(f"Outlets file not found: {outlets_path}")

    try:
        with open(outlets_path) as f:
            outlets_data = yaml.safe_load(f)

        if outlets_data is None or "outlets" not in outlets_data:
            return []

        outlets = []
        for outlet_data in outlets_data["outlets"]:
            try:
                outlets.append(OutletConfig(**outlet_data))
            except ValidationError as e:
                console.print(
                    f"[yellow]Skipping invalid outlet {outlet_data.get('name', 'unknown')}: {e}[/yellow]"
                )

        return outlets
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in outlets file: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)


def save_outlets(outlets: List[OutletConfig], outlets_path: Path) -> None:
    """Save outlets to YAML file."""
    outlets_path.parent.mkdir(parents=True, exist_ok=True)

    outlets_data = {"outlets": [o.model_dump(exclude_none=True) for o in outlets]}

    with open(outlets_path, "w") as f:
        yaml.dump(outlets_data, f, default_flow_style=False, sort_keys=False)
