"""Pipeline stage bookkeeping."""

import time
from typing import Any, Dict, List, Optional, Sequence

from rich.console import Console
from rich.table import Table

console = Console()

STAGES = (
    ("collect", "Collecting headlines from outlets"),
    ("cluster", "Clustering similar headlines"),
    ("rank", "Ranking stories by coverage"),
    ("cache", "Writing trending cache"),
)


class PipelineStage:
    """One step of a trending refresh, with timing and counters."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.started_at: Optional[float] = None
        self.finished_at: Optional[float] = None
        self.success = False
        self.error: Optional[str] = None
        self.stats: Dict[str, Any] = {}

    def start(self):
        self.started_at = time.perf_counter()

    def complete(self, stats: Optional[Dict[str, Any]] = None):
        self.finished_at = time.perf_counter()
        self.success = True
        self.stats.update(stats or {})

    def fail(self, error: str):
        self.finished_at = time.perf_counter()
        self.success = False
        self.error = error

    @property
    def duration(self) -> float:
        """Seconds between start and finish, 0 when the stage never ran."""
        if self.started_at is None or self.finished_at is None:
            return 0.0
        return self.finished_at - self.started_at

    def details(self) -> str:
        """Short human summary of the stage outcome."""
        if not self.success:
            return self.error or ("Failed" if self.started_at is not None else "Skipped")

        stats = self.stats
        if self.name == "collect":
            return (
                f"{stats.get('successful_outlets', 0)}/{stats.get('total_outlets', 0)} outlets, "
                f"{stats.get('total_headlines', 0)} headlines"
            )
        if self.name == "cluster":
            return f"{stats.get('clusters', 0)} clusters"
        if self.name == "rank":
            return f"{stats.get('stories', 0)} trending stories"
        if self.name == "cache":
            return "written" if stats.get("written") else "not written"
        return ""

    def __repr__(self) -> str:
        return f"PipelineStage({self.name!r}, success={self.success})"


def create_stages() -> List[PipelineStage]:
    return [PipelineStage(name, description) for name, description in STAGES]


def print_stage_summary(stages: Sequence[PipelineStage]) -> None:
    """Print pipeline execution summary."""
    table = Table(title="Pipeline Summary")
    table.add_column("Stage", style="cyan")
    table.add_column("Status", style="bold")
    table.add_column("Duration", style="yellow")
    table.add_column("Details", style="dim")

    for stage in stages:
        status = "[green]✓[/green]" if stage.success else "[red]✗[/red]"
        duration = f"{stage.duration:.1f}s" if stage.duration > 0 else "-"
        table.add_row(stage.name.title(), status, duration, stage.details())

    console.print(table)
