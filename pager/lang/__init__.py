"""Page language map (langdetect)."""

from .page_languages import MIN_PAGE_CHARS, dominant_language, page_language, page_languages

__all__ = [
    "MIN_PAGE_CHARS",
    "dominant_language",
    "page_language",
    "page_languages",
]
