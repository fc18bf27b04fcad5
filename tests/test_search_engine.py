from __future__ import annotations

from tinyvim.buffer import TextBuffer
from tinyvim.search import (
    SearchState,
    count_occurrences,
    find_next,
    find_previous,
    match_spans,
    replace_all,
)


def make_buffer(*lines: str) -> TextBuffer:
    return TextBuffer.from_lines(lines)


def test_find_next_scans_forward_without_wrapping() -> None:
    buffer = make_buffer("hello world", "world peace")

    first = find_next(buffer, 0, 0, "world")
    assert first == (0, 6)
    second = find_next(buffer, *first, "world")
    assert second == (1, 0)
    assert find_next(buffer, *second, "world") is None


def test_find_next_skips_match_under_cursor() -> None:
    buffer = make_buffer("abab")

    assert find_next(buffer, 0, 0, "ab") == (0, 2)


def test_find_previous_scans_backward_without_wrapping() -> None:
    buffer = make_buffer("hello world", "world peace")

    assert find_previous(buffer, 1, 0, "world") == (0, 6)
    assert find_previous(buffer, 0, 6, "world") is None


def test_find_previous_uses_last_match_before_column() -> None:
    buffer = make_buffer("ab ab ab")

    assert find_previous(buffer, 0, 6, "ab") == (0, 3)
    assert find_previous(buffer, 0, 3, "ab") == (0, 0)


def test_find_previous_ignores_match_under_cursor() -> None:
    buffer = make_buffer("hello world", "world peace")

    assert find_previous(buffer, 0, 8, "world") is None
    assert find_previous(buffer, 1, 3, "world") == (0, 6)
    assert find_previous(buffer, 0, 11, "world") == (0, 6)


def test_empty_term_matches_nothing() -> None:
    buffer = make_buffer("abc")

    assert find_next(buffer, 0, 0, "") is None
    assert find_previous(buffer, 0, 2, "") is None
    assert replace_all(buffer, "", "x") == 0
    assert match_spans("abc", "") == []
    assert buffer.snapshot() == ("abc",)


def test_replace_all_counts_occurrences() -> None:
    buffer = make_buffer("foo bar foo")

    assert replace_all(buffer, "foo", "baz") == 2
    assert buffer.snapshot() == ("baz bar baz",)


def test_replace_all_is_idempotent() -> None:
    buffer = make_buffer("cat cat", "dog", "a cat")

    assert replace_all(buffer, "cat", "cow") == 3
    once = buffer.snapshot()
    assert replace_all(buffer, "cat", "cow") == 0
    assert buffer.snapshot() == once


def test_count_occurrences_and_spans() -> None:
    buffer = make_buffer("aaaa", "a")

    assert count_occurrences(buffer, "aa") == 2
    assert match_spans("ab cab", "ab") == [(0, 2), (4, 6)]


def test_search_state_confirms_draft_even_when_empty() -> None:
    search = SearchState()
    search.begin_search()
    search.draft = "foo"
    assert search.confirm_search() == "foo"

    search.begin_search()
    search.draft = "bar"
    search.abandon_search()

    assert search.term == "foo"
    search.begin_search()
    assert search.confirm_search() == ""
    assert not search.has_term
