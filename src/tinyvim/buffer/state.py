"""Cursor position and vertical viewport tracking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .document import TextBuffer

Cursor = Tuple[int, int]  # (row, column)


@dataclass(slots=True)
class CursorModel:
    """Cursor ``(row, col)`` plus the first visible row of the viewport.

    ``col`` may equal the line length, meaning "after the last character".
    ``height`` is the number of text rows the host can display; ``None``
    until the host (or ``EditorState``) sizes the viewport.
    """

    row: int = 0
    col: int = 0
    offset_row: int = 0
    height: Optional[int] = None

    @property
    def position(self) -> Cursor:
        return (self.row, self.col)

    @property
    def rows(self) -> int:
        """Visible rows; an unsized viewport shows a single row."""

        return self.height or 1

    def set_position(self, buffer: TextBuffer, row: int, col: int) -> None:
        self.row = row
        self.col = col
        self.clamp(buffer)
        self.adjust_viewport()

    def move_by(self, buffer: TextBuffer, d_row: int, d_col: int) -> None:
        self.set_position(buffer, self.row + d_row, self.col + d_col)

    def jump_top(self, buffer: TextBuffer) -> None:
        self.row = 0
        self.offset_row = 0
        self.clamp(buffer)

    def jump_bottom(self, buffer: TextBuffer) -> None:
        self.set_position(buffer, buffer.line_count - 1, self.col)

    def line_start(self) -> None:
        self.col = 0

    def line_end(self, buffer: TextBuffer) -> None:
        self.col = buffer.line_length(self.row)

    def clamp(self, buffer: TextBuffer) -> None:
        # Column bound uses the line the row clamp landed on.
        self.row = max(0, min(self.row, buffer.line_count - 1))
        self.col = max(0, min(self.col, buffer.line_length(self.row)))

    def resize(self, height: int) -> None:
        self.height = max(1, height)
        self.adjust_viewport()

    def adjust_viewport(self, height: int | None = None) -> None:
        """Scroll so that ``offset_row <= row <= offset_row + height - 1``."""

        if height is not None:
            self.height = max(1, height)
        if self.row < self.offset_row:
            self.offset_row = self.row
        elif self.row >= self.offset_row + self.rows:
            self.offset_row = self.row - self.rows + 1
        self.offset_row = max(0, self.offset_row)
