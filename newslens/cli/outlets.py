"""Outlet management commands."""

from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config, OutletConfig, OutletSelectors, load_outlets, save_outlets
from ..ingestion import HeadlineCollector, print_collection_summary

console = Console()
outlets_app = typer.Typer(help="Manage news outlets")


def _load_editable_outlets(config: Config) -> List[OutletConfig]:
    """Outlets from outlets.yaml, seeded from the built-in list when missing."""
    try:
        return load_outlets(config.outlets_path)
    except FileNotFoundError:
        return config.get_outlets()


@outlets_app.command("list")
def outlets_list() -> None:
    """List all configured outlets."""
    config = Config()
    outlets = config.get_outlets()

    if not outlets:
        console.print("[yellow]No outlets configured.[/yellow]")
        return

    table = Table(title="Configured Outlets")
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Enabled", style="yellow")
    table.add_column("URL", style="blue")

    for outlet in outlets:
        table.add_row(
            outlet.name,
            outlet.kind,
            "✓" if outlet.enabled else "✗",
            outlet.url,
        )

    console.print(table)


@outlets_app.command("add")
def outlets_add(
    name: str = typer.Option(..., "--name", "-n", help="Outlet name"),
    url: str = typer.Option(..., "--url", "-u", help="Front page or feed URL"),
    kind: str = typer.Option("html", "--kind", "-k", help="Collection method (html, rss)"),
    headlines: Optional[str] = typer.Option(None, "--headlines", help="CSS selector for headline elements"),
    links: str = typer.Option("a", "--links", help="CSS selector for the link inside a headline"),
    title: str = typer.Option("", "--title", help="CSS selector for the title inside a headline"),
    summary: str = typer.Option("", "--summary", help="CSS selector for the teaser text"),
) -> None:
    """Add a new outlet."""
    config = Config()
    outlets = _load_editable_outlets(config)

    if any(o.name == name or o.url == url for o in outlets):
        console.print(f"[red]Outlet '{name}' or URL already exists.[/red]")
        raise typer.Exit(1)

    selectors = None
    if headlines:
        selectors = OutletSelectors(headlines=headlines, links=links, title=title, summary=summary)

    try:
        new_outlet = OutletConfig(name=name, url=url, kind=kind, selectors=selectors)
    except ValueError as e:
        console.print(f"[red]Invalid outlet: {e}[/red]")
        raise typer.Exit(1)

    outlets.append(new_outlet)
    save_outlets(outlets, config.outlets_path)

    console.print(f"[green]✅ Added outlet: {name}[/green]")


@outlets_app.command("remove")
def outlets_remove(
    name: str = typer.Argument(..., help="Outlet name to remove"),
) -> None:
    """Remove an outlet."""
    config = Config()
    outlets = _load_editable_outlets(config)

    original_count = len(outlets)
    outlets = [o for o in outlets if o.name != name]

    if len(outlets) == original_count:
        console.print(f"[red]Outlet '{name}' not found.[/red]")
        raise typer.Exit(1)

    save_outlets(outlets, config.outlets_path)
    console.print(f"[green]✅ Removed outlet: {name}[/green]")


@outlets_app.command("test")
def outlets_test(
    name: Optional[str] = typer.Argument(None, help="Outlet name to test (or test all)"),
) -> None:
    """Collect headlines from outlets without touching the cache."""
    config = Config()
    outlets = config.get_outlets()

    if name:
        outlets = [o for o in outlets if o.name == name]
        if not outlets:
            console.print(f"[red]Outlet '{name}' not found.[/red]")
            raise typer.Exit(1)

    for outlet in outlets:
        if not outlet.enabled:
            console.print(f"[yellow]⚠️  {outlet.name}: Disabled[/yellow]")

    collector = HeadlineCollector.from_config(config.config.scraper)
    results = collector.collect_all_sync(outlets)

    for result in results:
        if result.success:
            console.print(f"[green]✅ {result.outlet_name}: {result.headline_count} headlines[/green]")
            for headline in result.headlines[:3]:
                console.print(f"   [dim]{headline.title}[/dim]")
        else:
            console.print(f"[red]❌ {result.outlet_name}: {result.error}[/red]")

    print_collection_summary(results)
