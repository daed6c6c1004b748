"""Case-insensitive page search.

Results are recomputed from scratch on every call; nothing is cached
between queries or content changes.
"""

from __future__ import annotations

from typing import List, Sequence


def find_matches(pages: Sequence[str], query: str) -> List[int]:
    """Return 1-based numbers of pages containing ``query``, ignoring case.

    Doxygen:
    - @param pages: Page texts in document order.
    - @param query: Literal substring to look for; empty means no results.
    - @return: Ascending, duplicate-free page numbers.
    """
    if not query:
        return []
    needle = query.lower()
    return [number for number, text in enumerate(pages, start=1) if needle in text.lower()]


def format_matches(matches: Sequence[int]) -> str:
    # Rendered for highlighting in the UI, e.g. "1, 3"
    return ", ".join(str(n) for n in matches)
