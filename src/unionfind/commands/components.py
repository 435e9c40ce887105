"""Connected components over a pair list."""

import logging
from pathlib import Path

import click
import pandas as pd
from rich.console import Console

from unionfind.analysis.component_detector import ComponentDetector, components_to_frame
from unionfind.analysis.presenter import display_components_table
from unionfind.analysis.validation import EdgeValidator
from unionfind.commands import resolve_config
from unionfind.error.cmd import handle_command_errors

console = Console()
logger = logging.getLogger(__name__)


@click.command()
@click.argument(
    "pairs_file", type=click.Path(exists=True, path_type=Path, file_okay=True, dir_okay=False)
)
@click.option(
    "--elements",
    "-e",
    type=click.Path(exists=True, path_type=Path, file_okay=True, dir_okay=False),
    help="Text file with one element per line, included even if unpaired",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output CSV file mapping each element to its component",
)
@click.pass_context
@handle_command_errors
def components(
    ctx: click.Context, pairs_file: Path, elements: Path | None, output: Path | None
) -> None:
    """Detect connected components from a list of linked pairs.

    PAIRS_FILE: CSV with element_1 and element_2 columns (names configurable).
    """
    config = resolve_config(ctx)
    settings = config.components
    columns = [settings.first_col, settings.second_col]

    console.print(f"[blue]Reading:[/blue] {pairs_file}")
    # Element ids are read as text so they match ids from --elements
    df = pd.read_csv(pairs_file, dtype={col: str for col in columns})
    console.print(f"[dim]Input pairs:[/dim] {df.shape[0]:,}")

    validator = EdgeValidator(pair_columns=columns)
    validator.require_columns(df, columns, kind="Pair list")
    df = validator.validate_pairs(df, source=str(pairs_file))

    extra: list[str] | None = None
    if elements:
        extra = [line.strip() for line in elements.read_text(encoding="utf-8").splitlines()]
        extra = [item for item in extra if item]
        logger.debug(f"Loaded {len(extra)} extra elements from {elements}")

    detector = ComponentDetector(
        first_col=settings.first_col,
        second_col=settings.second_col,
        weight_col=settings.weight_col,
        min_weight=settings.min_weight,
    )
    found = detector.detect(df, elements=extra)

    display_components_table(found, console, max_rows=config.output.max_rows)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        components_to_frame(found).to_csv(output, index=False)
        console.print(f"[green]✓ Saved:[/green] {output}")

    console.print("[bold green]✓[/bold green] Components detected!")
