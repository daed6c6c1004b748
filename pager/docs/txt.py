from __future__ import annotations

import os
import re

from .model import Document
from .parser import parse_document, serialize_pages

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9]")


def read_text(path: str) -> str:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Text file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def read_txt(path: str) -> Document:
    """Read and parse a text file; the file name becomes the document title."""
    return parse_document(read_text(path), title=os.path.basename(path))


def export_filename(title: str) -> str:
    """Return the download name for a document title: every non-alphanumeric char becomes '_'."""
    return f"{_UNSAFE_FILENAME_CHARS.sub('_', title or '')}.txt"


def write_txt(text: str, out_path: str) -> str:
    parent = os.path.dirname(out_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(text)
    return out_path


def write_document(doc: Document, out_path: str) -> str:
    return write_txt(serialize_pages(doc.pages), out_path)
