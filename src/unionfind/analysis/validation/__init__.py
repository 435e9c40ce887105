"""Data validation module for edge and pair tables."""

from unionfind.analysis.validation.edge_validator import EdgeValidator

__all__ = ["EdgeValidator"]
