"""Presentation layer for CLI commands.

Renders spanning trees and components as Rich tables, keeping display
logic out of the command modules.
"""

from collections.abc import Hashable

from rich.console import Console
from rich.table import Table

from unionfind.analysis.component_detector import Component
from unionfind.analysis.kruskal import Edge, total_weight


def display_mst_table(tree: list[Edge], console: Console, max_rows: int = 20) -> None:
    """Display accepted spanning tree edges as a Rich table.

    Args:
        tree: Accepted edges in acceptance order
        console: Rich console for output
        max_rows: Maximum number of edge rows to print
    """
    table = Table(title="Minimum Spanning Tree")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Edge", style="cyan")
    table.add_column("Weight", style="green", justify="right")

    for index, edge in enumerate(tree[:max_rows], start=1):
        table.add_row(str(index), str(edge), _format_number(edge.weight))

    console.print(table)
    if len(tree) > max_rows:
        console.print(f"[dim]... {len(tree) - max_rows} more edges not shown[/dim]")
    console.print(f"[bold]Edges:[/bold] {len(tree)}")
    console.print(f"[bold]Total weight:[/bold] {_format_number(total_weight(tree))}")


def display_components_table(
    components: dict[Hashable, Component], console: Console, max_rows: int = 20
) -> None:
    """Display connected components as Rich tables, largest first.

    Args:
        components: Components keyed by component_id
        console: Rich console for output
        max_rows: Maximum number of component rows to print

    Displays two tables:
    1. Overview (elements, components, singletons, largest size)
    2. Components (id, size, members preview)
    """
    ordered = sorted(components.values(), key=lambda c: c.size, reverse=True)
    total_elements = sum(c.size for c in ordered)
    singletons = sum(1 for c in ordered if c.is_singleton)

    overview = Table(title="Components - Overview")
    overview.add_column("Metric", style="cyan")
    overview.add_column("Value", style="green", justify="right")
    overview.add_row("Total elements", str(total_elements))
    overview.add_row("Total components", str(len(ordered)))
    overview.add_row("Singleton components", str(singletons))
    overview.add_row("Largest component", str(ordered[0].size if ordered else 0))
    console.print(overview)

    if not ordered:
        return

    detail = Table(title="Components")
    detail.add_column("Component", style="cyan")
    detail.add_column("Size", style="green", justify="right")
    detail.add_column("Members")
    for component in ordered[:max_rows]:
        preview = ", ".join(str(m) for m in component.members[:10])
        if component.size > 10:
            preview += ", ..."
        detail.add_row(str(component.component_id), str(component.size), preview)

    console.print(detail)
    if len(ordered) > max_rows:
        console.print(f"[dim]... {len(ordered) - max_rows} more components not shown[/dim]")


def _format_number(value: float) -> str:
    if isinstance(value, float) and not value.is_integer():
        return f"{value:.4f}"
    return str(int(value))
