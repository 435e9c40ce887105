"""Exceptions raised outside the disjoint-set core."""


class EdgeListError(ValueError):
    """Raised when an edge or pair table cannot be processed."""
