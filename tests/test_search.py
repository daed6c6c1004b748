from pager.search import find_matches, format_matches


def test_find_matches_is_case_insensitive_and_ordered():
    assert find_matches(["Hello World", "no match", "WORLD peace"], "world") == [1, 3]


def test_find_matches_empty_query_returns_nothing():
    assert find_matches(["anything", ""], "") == []


def test_find_matches_reports_each_page_once():
    assert find_matches(["aaa aaa", "b", "AaA"], "a") == [1, 3]


def test_find_matches_treats_query_literally():
    assert find_matches(["a.b", "axb", "(x)"], "a.b") == [1]
    assert find_matches(["a.b", "axb", "(x)"], "(x)") == [3]


def test_format_matches():
    assert format_matches([1, 3]) == "1, 3"
    assert format_matches([]) == ""
