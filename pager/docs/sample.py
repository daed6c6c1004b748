from __future__ import annotations

from .model import Document, TocEntry

SAMPLE_TITLE = "Sample Document"

_SAMPLE_PAGES = [
    "This is the first page of the document. It contains some sample text.",
    "This is the second page. It demonstrates the page navigation feature.",
    "The third page shows how the search functionality works.",
    "On this fourth page, we can see the table of contents in action.",
    "This fifth and final page concludes our sample document.",
]

_SAMPLE_TOC = [
    ("Introduction", 1),
    ("Navigation", 2),
    ("Search", 3),
    ("Table of Contents", 4),
    ("Conclusion", 5),
]


def sample_document() -> Document:
    """Built-in document shown before anything is loaded. Returns a fresh copy each call."""
    return Document(
        title=SAMPLE_TITLE,
        pages=list(_SAMPLE_PAGES),
        toc=[TocEntry(title=t, page_number=p) for t, p in _SAMPLE_TOC],
    )
