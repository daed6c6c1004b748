"""Page search helpers."""

from .index import find_matches, format_matches

__all__ = [
    "find_matches",
    "format_matches",
]
