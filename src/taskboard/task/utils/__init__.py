"""Utilities for task input parsing."""

from .parsers import parse_numeric_id, parse_timestamp

__all__ = ["parse_numeric_id", "parse_timestamp"]
