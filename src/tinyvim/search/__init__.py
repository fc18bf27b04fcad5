"""Substring search, replace-all, and persisted search state."""

from .engine import (
    SearchState,
    Span,
    count_occurrences,
    find_next,
    find_previous,
    match_spans,
    replace_all,
)

__all__ = [
    "SearchState",
    "Span",
    "find_next",
    "find_previous",
    "count_occurrences",
    "replace_all",
    "match_spans",
]
