"""
Entry point and public facade for the paginated text editor.

Packages:
- pager.docs: Document model, flat-text parser, txt IO, session buffer
- pager.search: Case-insensitive page search
- pager.history: Snapshot undo/redo
- pager.engine: DocumentEngine orchestration and auto-save
- pager.lang: Per-page language map via langdetect
"""

from __future__ import annotations

import os
from typing import List, Optional

from pager.config import EditorSettings, load_settings
from pager.docs import (
    BufferManager,
    Document,
    TocEntry,
    export_filename,
    parse_document,
    read_text,
    read_txt,
    serialize_pages,
    write_txt,
)
from pager.engine import AutoSaver, DocumentEngine
from pager.history import EditHistory
from pager.search import find_matches, format_matches

__all__ = [
    # config
    "EditorSettings",
    "load_settings",
    # documents
    "Document",
    "TocEntry",
    "parse_document",
    "serialize_pages",
    "read_txt",
    "write_txt",
    "export_filename",
    "BufferManager",
    # search / history
    "find_matches",
    "format_matches",
    "EditHistory",
    # engine
    "DocumentEngine",
    "AutoSaver",
]


def _cli(argv: Optional[List[str]] = None) -> int:
    """CLI for batch editing a paginated text file.

    --file / -f: Input text file, pages separated by '---' lines (default: built-in sample)
    --search / -s: Print the pages containing this text (case-insensitive)
    --replace QUERY REPLACEMENT: Replace every occurrence of QUERY
    --edit INDEX TEXT: Replace the text of page INDEX (0-based), repeatable
    --undo N / --redo N: Undo or redo N edits after the edits above
    --bookmark PAGE: Toggle a bookmark, repeatable
    --page N: Page to print
    --info: Print title, page count, TOC and page languages
    --out / -o: Output path (default: export filename next to the input)
    --autosave: Write one snapshot into config/buffer
    --config: Path to editor.json
    """
    import argparse

    parser = argparse.ArgumentParser(description="Edit a paginated plain-text document ('---' separates pages).")
    parser.add_argument("--file", "-f", type=str, help="Path to input text file (default: built-in sample document)")
    parser.add_argument("--search", "-s", type=str, default="", help="Text to search for (case-insensitive)")
    parser.add_argument("--replace", nargs=2, metavar=("QUERY", "REPLACEMENT"), help="Replace all occurrences of QUERY")
    parser.add_argument("--edit", nargs=2, action="append", default=[], metavar=("INDEX", "TEXT"), help="Set page INDEX (0-based) to TEXT; repeatable")
    parser.add_argument("--undo", type=int, default=0, help="Number of edits to undo (default: 0)")
    parser.add_argument("--redo", type=int, default=0, help="Number of edits to redo after undoing (default: 0)")
    parser.add_argument("--bookmark", type=int, action="append", default=[], help="Toggle bookmark on page number; repeatable")
    parser.add_argument("--page", type=int, default=1, help="Page number to print (default: 1)")
    parser.add_argument("--info", action="store_true", help="Print document information")
    parser.add_argument("--out", "-o", type=str, help="Path to save the edited document")
    parser.add_argument("--autosave", action="store_true", help="Write one auto-save snapshot into the session buffer")
    parser.add_argument("--config", type=str, help="Path to editor.json (default: config/editor.json)")

    args = parser.parse_args(argv)
    settings = load_settings(args.config)

    engine = DocumentEngine()
    if args.file:
        try:
            raw = read_text(args.file)
        except FileNotFoundError as e:
            print(str(e))
            return 2
        engine.load_document(raw, os.path.basename(args.file))

    for index, text in args.edit:
        try:
            engine.edit_page(int(index), text)
        except (IndexError, ValueError) as e:
            print(f"Invalid edit: {e}")
            return 2

    if args.replace:
        engine.replace_all(args.replace[0], args.replace[1])
    for _ in range(max(0, args.undo)):
        engine.undo()
    for _ in range(max(0, args.redo)):
        engine.redo()
    for number in args.bookmark:
        engine.toggle_bookmark(number)
    engine.set_current_page(args.page)

    if args.info:
        print(f"title: {engine.document.title}")
        print(f"pages: {engine.page_count}")
        for entry in engine.document.toc:
            print(f"toc: {entry.title} -> {entry.page_number}")
        for number, code in engine.page_languages.items():
            print(f"language: page {number} -> {code or 'unknown'}")
        code, share = engine.dominant_language()
        if code is not None:
            print(f"language: {code} ({share:.0%} of text)")

    if args.search:
        engine.set_search_term(args.search)
        print(f"matches: {engine.highlighted}")

    print(f"page {engine.current_page} of {engine.page_count}:")
    print(engine.current_page_text)
    if engine.bookmarks:
        print(f"bookmarks: {', '.join(str(b) for b in engine.bookmarks)}")

    if args.autosave or settings.autosave_enabled:
        buffer = BufferManager(project_root=settings.buffer_root, keep=settings.autosave_keep)
        saver = AutoSaver(engine, buffer, interval=settings.autosave_interval, enabled=True)
        print(f"autosave: {saver.save_now()}")

    if args.out or args.file:
        base_dir = os.path.dirname(args.file) if args.file else ""
        out_path = args.out or os.path.join(base_dir, engine.export_filename)
        print(f"txt: {write_txt(engine.export_text(), out_path)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(_cli())
