"""Flat text <-> paginated document conversion.

Format: one page per block, blocks separated by a line containing exactly
``---``. Lines are trimmed and blank lines dropped on import, so parsing is
lossy with respect to blank lines and surrounding whitespace.
"""

from __future__ import annotations

from typing import List, Sequence

from .model import Document, TocEntry

SEPARATOR = "---"
PAGE_JOINER = f"\n{SEPARATOR}\n"


def split_pages(raw_text: str) -> List[str]:
    """Split raw text into page strings.

    Doxygen:
    - @param raw_text: Flat text as read from disk.
    - @return: Page texts; an input with no content yields an empty list.
    """
    pages: List[str] = []
    buf: List[str] = []
    for line in (raw_text or "").split("\n"):
        line = line.strip()
        if not line:
            continue
        if line == SEPARATOR:
            pages.append("\n".join(buf))
            buf = []
        else:
            buf.append(line)
    if buf:
        pages.append("\n".join(buf))
    return pages


def build_toc(pages: Sequence[str]) -> List[TocEntry]:
    return [TocEntry(title=f"Page {i}", page_number=i) for i in range(1, len(pages) + 1)]


def parse_document(raw_text: str, title: str = "") -> Document:
    """Parse flat text into a Document with an auto-generated table of contents."""
    pages = split_pages(raw_text)
    return Document(title=title, pages=pages, toc=build_toc(pages))


def serialize_pages(pages: Sequence[str]) -> str:
    return PAGE_JOINER.join(pages)
