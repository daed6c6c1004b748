import pytest

from pager.docs import export_filename, parse_document, read_txt, write_document, write_txt


def test_read_txt_uses_file_name_as_title(tmp_path):
    path = tmp_path / "chapter one.txt"
    path.write_text("page a\n---\npage b\n", encoding="utf-8")
    doc = read_txt(str(path))
    assert doc.title == "chapter one.txt"
    assert doc.pages == ["page a", "page b"]


def test_read_txt_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_txt(str(tmp_path / "missing.txt"))


def test_write_then_read_back(tmp_path):
    doc = parse_document("one\n---\ntwo", title="x")
    out = write_document(doc, str(tmp_path / "sub" / "out.txt"))
    assert read_txt(out).pages == ["one", "two"]


def test_write_txt_returns_path(tmp_path):
    out = str(tmp_path / "plain.txt")
    assert write_txt("hello", out) == out


def test_export_filename():
    assert export_filename("Sample Document") == "Sample_Document.txt"
    assert export_filename("résumé") == "r_sum_.txt"
    assert export_filename("") == ".txt"
