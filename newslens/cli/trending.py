"""Trending story commands."""

import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..clustering import CATEGORIES
from ..config import Config
from ..models import TrendingStory
from ..pipeline import TrendingService, print_stage_summary

console = Console()
trending_app = typer.Typer(help="Detect and browse trending stories")


def _validate_category(category: Optional[str]) -> Optional[str]:
    if category and category != "all" and category not in CATEGORIES:
        console.print(f"[red]Unknown category '{category}'. Choose from: all, {', '.join(CATEGORIES)}[/red]")
        raise typer.Exit(1)
    return category


def _print_stories(stories: List[TrendingStory]) -> None:
    if not stories:
        console.print("[yellow]No trending stories found.[/yellow]")
        return

    table = Table(title="Trending Stories")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="yellow")
    table.add_column("Category", style="magenta")
    table.add_column("Sources", style="green")

    for story in stories:
        table.add_row(
            story.id,
            story.title,
            story.category,
            f"{story.source_count} ({', '.join(story.sources)})",
        )

    console.print(table)


@trending_app.command("list")
def trending_list(
    min_sources: Optional[int] = typer.Option(
        None,
        "--min-sources",
        "-m",
        min=1,
        help="Minimum outlets per story (default: from config)",
    ),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only show this category"),
    refresh: bool = typer.Option(False, "--refresh", "-r", help="Ignore the cache and re-collect"),
    as_json: bool = typer.Option(False, "--json", help="Print stories as JSON"),
) -> None:
    """List trending stories."""
    category = _validate_category(category)
    service = TrendingService(Config())

    try:
        stories = service.get_trending_stories_sync(
            min_sources=min_sources,
            category=category,
            force_refresh=refresh,
        )
    except Exception as e:
        console.print(f"[red]Failed to fetch trending stories: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([s.to_json_dict() for s in stories], indent=2))
        return

    _print_stories(stories)


@trending_app.command("show")
def trending_show(
    story_id: str = typer.Argument(..., help="Trending story ID"),
    as_json: bool = typer.Option(False, "--json", help="Print the story as JSON"),
) -> None:
    """Show a trending story from the current cache."""
    service = TrendingService(Config())
    story = service.get_trending_story_by_id(story_id)

    if story is None:
        console.print(f"[red]Trending story '{story_id}' not found.[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(story.to_json_dict(), indent=2))
        return

    console.print(f"[bold yellow]{story.title}[/bold yellow]")
    console.print(f"Category: {story.category} • {story.source_count} sources")
    if story.summary:
        console.print(f"\n{story.summary}")

    console.print("\n[bold]Perspectives:[/bold]")
    for perspective in story.perspectives:
        console.print(f"  [cyan]{perspective.source}[/cyan]: {perspective.title}")
        if perspective.summary:
            console.print(f"    [dim]{perspective.summary}[/dim]")
        console.print(f"    [blue]{perspective.link}[/blue]")


@trending_app.command("refresh")
def trending_refresh() -> None:
    """Re-collect headlines and rebuild the trending cache."""
    service = TrendingService(Config())
    result = service.refresh_trending_stories_sync()

    print_stage_summary(service.stages)

    if not result.success:
        console.print(f"[red]❌ {result.message}: {result.error}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ {result.message} ({result.count} stories)[/green]")


@trending_app.command("categories")
def trending_categories() -> None:
    """List story categories."""
    for category in CATEGORIES:
        typer.echo(category)
