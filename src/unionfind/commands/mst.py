"""Minimum spanning tree over a weighted edge list."""

import logging
from pathlib import Path

import click
import pandas as pd
from rich.console import Console

from unionfind.analysis.kruskal import edges_from_frame, minimum_spanning_tree
from unionfind.analysis.presenter import display_mst_table
from unionfind.analysis.validation import EdgeValidator
from unionfind.commands import resolve_config
from unionfind.error.cmd import handle_command_errors

console = Console()
logger = logging.getLogger(__name__)


@click.command()
@click.argument(
    "edges_file", type=click.Path(exists=True, path_type=Path, file_okay=True, dir_okay=False)
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output CSV file for the accepted edges",
)
@click.pass_context
@handle_command_errors
def mst(ctx: click.Context, edges_file: Path, output: Path | None) -> None:
    """Compute a minimum spanning tree with Kruskal's algorithm.

    EDGES_FILE: CSV with source, target and weight columns (names configurable).
    """
    config = resolve_config(ctx)
    columns = [config.mst.source_col, config.mst.target_col, config.mst.weight_col]

    console.print(f"[blue]Reading:[/blue] {edges_file}")
    df = pd.read_csv(edges_file)
    console.print(f"[dim]Input edges:[/dim] {df.shape[0]:,}")

    validator = EdgeValidator(edge_columns=columns)
    validator.require_columns(df, columns, kind="Edge list")
    df = validator.validate_edges(df, source=str(edges_file))
    df = df.dropna(subset=columns)

    edges = edges_from_frame(
        df,
        source_col=config.mst.source_col,
        target_col=config.mst.target_col,
        weight_col=config.mst.weight_col,
    )
    tree = minimum_spanning_tree(edges)
    logger.debug(f"Accepted {len(tree)} of {len(edges)} edges")

    display_mst_table(tree, console, max_rows=config.output.max_rows)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        pd.DataFrame(
            [(e.u, e.v, e.weight) for e in tree],
            columns=columns,
        ).to_csv(output, index=False)
        console.print(f"[green]✓ Saved:[/green] {output}")

    console.print("[bold green]✓[/bold green] Spanning tree computed!")
