from pager.docs import SEPARATOR, Document, TocEntry, parse_document, serialize_pages, split_pages


def test_parse_splits_on_separator_and_builds_toc():
    doc = parse_document("Intro line\n---\nBody line", title="intro.txt")
    assert doc.title == "intro.txt"
    assert doc.pages == ["Intro line", "Body line"]
    assert [(e.title, e.page_number) for e in doc.toc] == [("Page 1", 1), ("Page 2", 2)]


def test_parse_trims_lines_and_drops_blank_lines():
    raw = "  first  \n\n   second\n   ---   \n\n third \n"
    assert split_pages(raw) == ["first\nsecond", "third"]


def test_parse_empty_input_has_no_pages():
    doc = parse_document("")
    assert doc.pages == []
    assert doc.toc == []
    assert parse_document("\n  \n\n").pages == []


def test_parse_without_separator_is_single_page():
    assert split_pages("only\ncontent") == ["only\ncontent"]


def test_leading_and_repeated_separators_create_empty_pages():
    assert split_pages("---\na\n---\n---\nb") == ["", "a", "", "b"]


def test_trailing_separator_does_not_add_page():
    assert split_pages("a\n---") == ["a"]


def test_windows_line_endings_are_trimmed():
    assert split_pages("a\r\n---\r\nb\r\n") == ["a", "b"]


def test_serialize_joins_with_separator_lines():
    assert serialize_pages(["one", "two", "three"]) == f"one\n{SEPARATOR}\ntwo\n{SEPARATOR}\nthree"
    assert serialize_pages([]) == ""


def test_round_trip_for_well_formed_pages():
    pages = ["Title\nline two", "second page", "x = 1\ny = 2"]
    assert parse_document(serialize_pages(pages)).pages == pages


def test_document_rejects_toc_outside_pages():
    import pytest

    with pytest.raises(ValueError):
        Document(title="t", pages=["a"], toc=[TocEntry(title="Missing", page_number=2)])
