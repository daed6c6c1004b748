"""Document layer: model, flat-text parser and txt IO.

Exposes:
- Data model: Document, TocEntry
- Parser: parse_document, serialize_pages, split_pages, build_toc, SEPARATOR
- Files: read_text, read_txt, write_txt, write_document, export_filename
- Built-in default: sample_document
- Buffer manager: BufferManager (auto-save snapshots under config/buffer)
"""

from .model import Document, TocEntry
from .parser import SEPARATOR, build_toc, parse_document, serialize_pages, split_pages
from .txt import export_filename, read_text, read_txt, write_document, write_txt
from .sample import sample_document
from .buffer import BufferManager

__all__ = [
    "Document",
    "TocEntry",
    "SEPARATOR",
    "build_toc",
    "parse_document",
    "serialize_pages",
    "split_pages",
    "export_filename",
    "read_text",
    "read_txt",
    "write_document",
    "write_txt",
    "sample_document",
    "BufferManager",
]
