"""CLI entry point for unionfind tool."""

import logging
from pathlib import Path

import click
from rich.console import Console

from unionfind import __version__
from unionfind.commands import components, islands, mst
from unionfind.core.config import load_config

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="unionfind")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    help="JSON configuration file",
)
@click.pass_context
def main(ctx, verbose: bool, config_path: Path | None):
    """Disjoint-set (union-find) toolkit.

    Count islands, build minimum spanning trees and detect connected
    components with a union-find forest.
    """
    ctx.ensure_object(dict)
    config = load_config(config_path)
    if verbose:
        config.output.verbose = True

    logging.basicConfig(
        level=logging.DEBUG if config.output.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj["config"] = config


# Register commands
main.add_command(islands.islands)
main.add_command(mst.mst)
main.add_command(components.components)


if __name__ == "__main__":
    main()
