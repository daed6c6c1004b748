from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class TocEntry:
    title: str
    page_number: int


@dataclass
class Document:
    title: str = ""
    pages: List[str] = field(default_factory=list)
    toc: List[TocEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        for entry in self.toc:
            if entry.page_number < 1 or entry.page_number > len(self.pages):
                raise ValueError(
                    f"TOC entry '{entry.title}' points at page {entry.page_number}, "
                    f"document has {len(self.pages)} pages."
                )

    @property
    def page_count(self) -> int:
        return len(self.pages)
