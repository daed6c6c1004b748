"""Editing engine and its auto-save collaborator."""

from .editor import DocumentEngine
from .autosave import AutoSaver

__all__ = [
    "DocumentEngine",
    "AutoSaver",
]
