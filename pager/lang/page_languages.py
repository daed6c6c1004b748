"""Per-page language map for a paginated document.

Each page is classified on its own so mixed-language documents show which
pages are in which language. Pages too short to classify map to None.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Optional, Sequence, Tuple

from langdetect import DetectorFactory, LangDetectException, detect

# deterministic results across runs
DetectorFactory.seed = 0

MIN_PAGE_CHARS = 12


def page_language(text: str) -> Optional[str]:
    """Language code of a single page, or None if there is too little text."""
    stripped = (text or "").strip()
    if len(stripped) < MIN_PAGE_CHARS:
        return None
    try:
        code = detect(stripped)
    except LangDetectException:
        return None
    # zh-cn / zh-tw keep their region, everything else is reduced to the base code
    return code if code.startswith("zh") else code.split("-")[0]


def page_languages(pages: Sequence[str]) -> Dict[int, Optional[str]]:
    """Map 1-based page number to the detected language code."""
    return {number: page_language(text) for number, text in enumerate(pages, start=1)}


def dominant_language(pages: Sequence[str]) -> Tuple[Optional[str], float]:
    """Most common page language, weighted by page length.

    Doxygen:
    - @param pages: Page texts in document order.
    - @return: (code, share of classified text in that language); (None, 0.0) if no page could be classified.
    """
    weights: Counter = Counter()
    for number, code in page_languages(pages).items():
        if code is not None:
            weights[code] += len(pages[number - 1].strip())
    if not weights:
        return None, 0.0
    code, weight = weights.most_common(1)[0]
    return code, weight / sum(weights.values())
