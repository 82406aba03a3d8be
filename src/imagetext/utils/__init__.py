"""Utility modules."""

from imagetext.utils.colors import normalize_color, parse_color

__all__ = [
    "normalize_color",
    "parse_color",
]
