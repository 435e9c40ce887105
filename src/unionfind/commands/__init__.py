"""Subcommands of the unionfind CLI."""

import click

from unionfind.core.config import Config, load_config


def resolve_config(ctx: click.Context) -> Config:
    """Get the Config stored by the root group, loading defaults when invoked standalone."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and "config" in obj:
        return obj["config"]
    return load_config()
