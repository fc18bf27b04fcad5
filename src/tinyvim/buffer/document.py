"""Line storage for the editing buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

Line = List[str]


@dataclass(slots=True)
class TextBuffer:
    """Ordered, mutable list of lines, each a list of characters.

    The buffer never holds zero lines. Every mutator takes explicit
    coordinates and treats out-of-range ones as a no-op, returning ``False``,
    so callers may pass unclamped positions without risking an ``IndexError``.
    """

    _lines: List[Line] = field(default_factory=lambda: [[]])

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [[]]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "TextBuffer":
        return cls(_lines=[list(line) for line in lines])

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        """Split on line feeds; a trailing newline leaves a trailing empty line."""

        return cls.from_lines(text.split("\n"))

    def snapshot(self) -> Sequence[str]:
        """Return the current lines as immutable strings."""

        return tuple("".join(line) for line in self._lines)

    def copy(self) -> "TextBuffer":
        return TextBuffer(_lines=[list(line) for line in self._lines])

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, row: int) -> str:
        if not self._valid_row(row):
            return ""
        return "".join(self._lines[row])

    def line_length(self, row: int) -> int:
        if not self._valid_row(row):
            return 0
        return len(self._lines[row])

    def set_line(self, row: int, text: str) -> bool:
        if not self._valid_row(row):
            return False
        self._lines[row] = list(text)
        return True

    def insert_char(self, row: int, col: int, ch: str) -> bool:
        if not self._valid_row(row) or not 0 <= col <= len(self._lines[row]):
            return False
        self._lines[row].insert(col, ch)
        return True

    def delete_char(self, row: int, col: int) -> bool:
        if not self._valid_row(row) or not 0 <= col < len(self._lines[row]):
            return False
        del self._lines[row][col]
        return True

    def delete_line(self, row: int) -> bool:
        if len(self._lines) <= 1 or not self._valid_row(row):
            return False
        del self._lines[row]
        return True

    def split_line(self, row: int, col: int) -> bool:
        if not self._valid_row(row) or not 0 <= col <= len(self._lines[row]):
            return False
        line = self._lines[row]
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])
        return True

    def join_with_previous(self, row: int) -> bool:
        if row <= 0 or not self._valid_row(row):
            return False
        self._lines[row - 1].extend(self._lines[row])
        del self._lines[row]
        return True

    def insert_line_after(self, row: int, text: str) -> bool:
        if not self._valid_row(row):
            return False
        self._lines.insert(row + 1, list(text))
        return True

    def _valid_row(self, row: int) -> bool:
        return 0 <= row < len(self._lines)
