"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, create_default_outlets, save_config, save_outlets
from ..config.loader import DEFAULT_CONFIG_DIR

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_DIR,
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    workspace: Path = typer.Option(
        Path.home() / ".newslens",
        "--workspace",
        "-w",
        help="Workspace directory holding the trending cache",
    ),
    min_sources: int = typer.Option(2, "--min-sources", min=1, help="Outlets required for a trending story"),
    seed_outlets: bool = typer.Option(
        True,
        "--seed-outlets/--no-seed-outlets",
        help="Write the default outlet list to outlets.yaml",
    ),
) -> None:
    """Initialize newslens configuration."""
    console.print(Panel.fit("newslens - Initialization", style="bold blue"))

    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.yaml"
    outlets_path = config_dir / "outlets.yaml"

    config = ConfigModel(
        workspace_root=str(workspace),
        trending={"min_sources": min_sources},
    )

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    if seed_outlets:
        outlets = create_default_outlets()
        save_outlets(outlets, outlets_path)
        console.print(f"✅ Created outlets: {outlets_path} (seeded with {len(outlets)} outlets)")
    else:
        save_outlets([], outlets_path)
        console.print(f"✅ Created outlets: {outlets_path} (empty)")

    workspace.mkdir(parents=True, exist_ok=True)
    console.print(f"✅ Created workspace: {workspace}")

    console.print(
        Panel(
            f"[green]✅ newslens initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Outlets: {outlets_path}\n"
            f"Workspace: {workspace}\n\n"
            f"Next steps:\n"
            f"1. Point other commands at this config: [bold]export NEWSLENS_CONFIG={config_path}[/bold]\n"
            f"2. Run: [bold]newslens trending list[/bold]",
            style="green",
        )
    )
