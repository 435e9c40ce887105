"""Count islands on a text chart."""

import logging
from pathlib import Path

import click
from rich.console import Console

from unionfind.analysis.islands import find_islands
from unionfind.commands import resolve_config
from unionfind.error.cmd import handle_command_errors

console = Console()
logger = logging.getLogger(__name__)


@click.command()
@click.argument(
    "chart_file", type=click.Path(exists=True, path_type=Path, file_okay=True, dir_okay=False)
)
@click.option("--land", "-l", type=str, default=None, help="Land marker character (default: '.')")
@click.option("--details", is_flag=True, help="Show the size of every island")
@click.pass_context
@handle_command_errors
def islands(ctx: click.Context, chart_file: Path, land: str | None, details: bool) -> None:
    """Count islands (connected land regions) on a chart.

    CHART_FILE: Text file where the land marker is land and anything else is sea.
    Cells touching left/right or up/down belong to the same island.
    """
    config = resolve_config(ctx)
    land = land if land is not None else config.islands.land

    console.print(f"[blue]Reading:[/blue] {chart_file}")
    chart = chart_file.read_text(encoding="utf-8")
    logger.debug(f"Chart has {len(chart.splitlines())} lines, land marker {land!r}")

    found = find_islands(chart, land=land)

    console.print(f"[bold]Number of islands:[/bold] {len(found)}")
    if details:
        for index, cells in enumerate(found, start=1):
            console.print(f"  island {index}: {len(cells)} cells")
    console.print("[bold green]✓[/bold green] Islands counted!")
