"""Core configuration for the unionfind command-line tool."""

from unionfind.core.config import Config, load_config

__all__ = ["Config", "load_config"]
