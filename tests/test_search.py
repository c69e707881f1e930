import pytest

from quilledit.piecetable import PieceTable
from quilledit.search import kmp_search, prefix_table


def test_prefix_table_worked_example():
    assert prefix_table("ABABCABAB") == [0, 0, 1, 2, 0, 1, 2, 3, 4]


def test_prefix_table_empty_pattern():
    assert prefix_table("") == []


@pytest.mark.parametrize("pattern", ["a", "aaaa", "abcabd", "aabaaab"])
def test_prefix_table_entries_are_prefix_suffixes(pattern):
    table = prefix_table(pattern)
    assert len(table) == len(pattern)
    assert table[0] == 0
    for end, size in enumerate(table):
        assert size <= end
        assert pattern[:size] == pattern[end + 1 - size:end + 1]


def test_overlapping_matches_are_reported():
    assert kmp_search("aa", PieceTable("aaaa")) == [0, 1, 2]


@pytest.mark.parametrize(
    "pattern, text",
    [("", "abc"), ("abc", ""), ("abcd", "abc"), ("zz", "abcabc")],
)
def test_no_matches(pattern, text):
    assert kmp_search(pattern, PieceTable(text)) == []


@pytest.mark.parametrize(
    "pattern, text",
    [
        ("ab", "abababab"),
        ("needle", "hay needle stack needle"),
        ("aba", "abababa"),
        ("x", "xyxxyx"),
    ],
)
def test_every_match_is_real_and_ordered(pattern, text):
    found = kmp_search(pattern, PieceTable(text))
    assert found
    assert found == sorted(set(found))
    for index in found:
        assert text[index:index + len(pattern)] == pattern
    assert found[0] == text.find(pattern)
    assert found[-1] == text.rfind(pattern)


def test_search_sees_inserted_text():
    table = PieceTable("one three")
    table.insert("two ", 4)
    assert kmp_search("two", table) == [table.value().index("two")]


def test_search_accepts_plain_string():
    text = "find me, find me"
    assert kmp_search("find", text) == [0, text.rindex("find")]