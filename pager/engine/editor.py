"""Document edit-state engine.

One ``DocumentEngine`` instance owns everything the editor mutates: the
last-loaded document, the working copy of its pages, the undo/redo history,
bookmarks, the current page and the active search term. Callers never touch
those directly; every change goes through a method here so the history stays
consistent.

Page numbers are 1-based everywhere except ``edit_page``, which takes a
0-based index into the working pages.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Tuple

from pager.docs import Document, export_filename, parse_document, sample_document, serialize_pages
from pager.history import EditHistory
from pager.lang import dominant_language, page_languages
from pager.search import find_matches, format_matches

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"


class DocumentEngine:
    def __init__(self, document: Optional[Document] = None) -> None:
        self.document: Document = document if document is not None else sample_document()
        self._pages: List[str] = list(self.document.pages)
        self.history = EditHistory()
        self._bookmarks: List[int] = []
        self.current_page = 1
        self.search_term = ""

    # --- loading / export -------------------------------------------------

    def load_document(self, raw_text: str, title_hint: str = "") -> None:
        """Replace the document with parsed ``raw_text`` and start a fresh session.

        History, current page and search term are reset. Bookmarks are kept
        as they are, even when they now point past the last page.
        """
        self.document = parse_document(raw_text, title=title_hint or UNTITLED)
        self._pages = list(self.document.pages)
        self.history.reset()
        self.current_page = 1
        self.search_term = ""
        logger.info("Loaded '%s' with %d pages", self.document.title, len(self._pages))

    def export_text(self) -> str:
        return serialize_pages(self._pages)

    @property
    def export_filename(self) -> str:
        return export_filename(self.document.title)

    # --- edits --------------------------------------------------------------

    def edit_page(self, page_index: int, new_text: str) -> None:
        """Set the text of one page, recording the previous pages for undo.

        Doxygen:
        - @param page_index: 0-based index into the working pages.
        - @param new_text: Replacement text for that page.
        - @throws IndexError: If the index is out of range; nothing is changed.
        """
        if isinstance(page_index, bool) or not isinstance(page_index, int):
            raise IndexError(f"Page index must be an int, got {page_index!r}")
        if not 0 <= page_index < len(self._pages):
            raise IndexError(f"Page index {page_index} out of range for {len(self._pages)} pages")
        self.history.record(self._pages)
        self._pages[page_index] = new_text
        logger.debug("Edited page %d", page_index + 1)

    def replace_all(self, query: str, replacement: str) -> None:
        """Replace every case-insensitive occurrence of ``query`` on every page.

        ``query`` is matched literally and ``replacement`` is inserted as is.
        Does nothing when either string is empty. Clears the search term.
        """
        if not query or not replacement:
            return
        pattern = re.compile(re.escape(query), re.IGNORECASE)
        self.history.record(self._pages)
        self._pages = [pattern.sub(lambda _m: replacement, page) for page in self._pages]
        self.search_term = ""
        logger.debug("Replaced '%s' with '%s'", query, replacement)

    def undo(self) -> None:
        restored = self.history.undo(self._pages)
        if restored is not None:
            self._pages = restored

    def redo(self) -> None:
        restored = self.history.redo(self._pages)
        if restored is not None:
            self._pages = restored

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # --- navigation ---------------------------------------------------------

    def set_current_page(self, page_number: int) -> None:
        # Out-of-range or non-int requests are ignored, not clamped.
        if isinstance(page_number, bool) or not isinstance(page_number, int):
            return
        if 1 <= page_number <= len(self._pages):
            self.current_page = page_number

    def next_page(self) -> None:
        self.set_current_page(self.current_page + 1)

    def previous_page(self) -> None:
        self.set_current_page(self.current_page - 1)

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def pages(self) -> List[str]:
        """Copy of the working pages."""
        return list(self._pages)

    @property
    def current_page_text(self) -> str:
        if 1 <= self.current_page <= len(self._pages):
            return self._pages[self.current_page - 1]
        return ""

    # --- bookmarks ----------------------------------------------------------

    def toggle_bookmark(self, page_number: int) -> None:
        if page_number in self._bookmarks:
            self._bookmarks.remove(page_number)
        else:
            self._bookmarks.append(page_number)

    @property
    def bookmarks(self) -> List[int]:
        return list(self._bookmarks)

    # --- search -------------------------------------------------------------

    def set_search_term(self, query: str) -> None:
        self.search_term = query or ""

    def find_matches(self, query: Optional[str] = None) -> List[int]:
        """Pages matching ``query`` (or the active search term) in the working copy."""
        return find_matches(self._pages, self.search_term if query is None else query)

    @property
    def search_results(self) -> List[int]:
        return self.find_matches()

    @property
    def highlighted(self) -> str:
        return format_matches(self.search_results)

    # --- languages ----------------------------------------------------------

    @property
    def page_languages(self) -> Dict[int, Optional[str]]:
        """Detected language code per page number of the working copy."""
        return page_languages(self._pages)

    def dominant_language(self) -> Tuple[Optional[str], float]:
        return dominant_language(self._pages)
