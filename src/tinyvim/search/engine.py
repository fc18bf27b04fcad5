"""Plain substring search and replace over buffer lines.

Searches scan linearly and never wrap around the buffer edges. An empty term
matches nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from tinyvim.buffer.document import TextBuffer
from tinyvim.buffer.state import Cursor

Span = Tuple[int, int]


@dataclass(slots=True)
class SearchState:
    """Confirmed search term plus the in-progress text of both prompts."""

    term: str = ""
    draft: str = ""
    replacement: str = ""

    @property
    def has_term(self) -> bool:
        return bool(self.term)

    def begin_search(self) -> None:
        self.draft = ""

    def confirm_search(self) -> str:
        self.term = self.draft
        self.draft = ""
        return self.term

    def abandon_search(self) -> None:
        self.draft = ""

    def begin_replace(self) -> None:
        self.replacement = ""

    def abandon_replace(self) -> None:
        self.replacement = ""


def find_next(
    buffer: TextBuffer, from_row: int, from_col: int, term: str
) -> Optional[Cursor]:
    """First match starting after ``(from_row, from_col)``, scanning downward."""

    if not term:
        return None
    start_col = from_col + 1
    for row in range(max(0, from_row), buffer.line_count):
        col = buffer.get_line(row).find(term, max(0, start_col))
        if col != -1:
            return (row, col)
        start_col = 0
    return None


def find_previous(
    buffer: TextBuffer, from_row: int, from_col: int, term: str
) -> Optional[Cursor]:
    """Last match ending at or before ``from_col`` on the cursor row, else the
    last match on the nearest row above."""

    if not term:
        return None
    last_row = buffer.line_count - 1
    if from_row > last_row:
        from_row, from_col = last_row, buffer.line_length(last_row)
    end: Optional[int] = max(0, from_col)
    for row in range(from_row, -1, -1):
        col = buffer.get_line(row).rfind(term, 0, end)
        if col != -1:
            return (row, col)
        end = None
    return None


def count_occurrences(buffer: TextBuffer, term: str) -> int:
    if not term:
        return 0
    return sum(line.count(term) for line in buffer.snapshot())


def replace_all(buffer: TextBuffer, term: str, replacement: str) -> int:
    """Replace every non-overlapping ``term``; return the occurrence count.

    Only lines whose text actually changes are rewritten and counted.
    """

    if not term:
        return 0
    total = 0
    for row, line in enumerate(buffer.snapshot()):
        updated = line.replace(term, replacement)
        if updated != line:
            buffer.set_line(row, updated)
            total += line.count(term)
    return total


def match_spans(text: str, term: str) -> List[Span]:
    """Non-overlapping ``(start, end)`` ranges of ``term`` within ``text``."""

    spans: List[Span] = []
    if not term:
        return spans
    start = text.find(term)
    while start != -1:
        end = start + len(term)
        spans.append((start, end))
        start = text.find(term, end)
    return spans


__all__ = [
    "SearchState",
    "Span",
    "find_next",
    "find_previous",
    "count_occurrences",
    "replace_all",
    "match_spans",
]
