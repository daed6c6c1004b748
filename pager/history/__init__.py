"""Undo/redo history."""

from .stack import EditHistory, EditState

__all__ = [
    "EditHistory",
    "EditState",
]
