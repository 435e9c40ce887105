"""Error types and CLI error handling."""

from unionfind.error.exceptions import EdgeListError

__all__ = ["EdgeListError"]
