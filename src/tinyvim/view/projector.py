"""Pure projection of editor state into a renderable frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from tinyvim.search import Span, match_spans
from tinyvim.state import EditorMode, EditorState

FILLER = "~"
CURSOR_GLYPH = "|"


@dataclass(frozen=True, slots=True)
class FrameLine:
    """One viewport row.

    ``number`` is 1-based and ``None`` for filler rows past the buffer end.
    ``highlights`` and ``cursor_col`` are offsets into the tab-expanded
    ``text``; ``cursor_col`` is set only for the synthetic cursor drawn
    outside Normal mode.
    """

    number: Optional[int]
    text: str = ""
    highlights: Tuple[Span, ...] = ()
    cursor_col: Optional[int] = None

    @property
    def is_filler(self) -> bool:
        return self.number is None

    @property
    def gutter(self) -> str:
        return f"{self.number:4d} " if self.number is not None else ""

    def render(self) -> str:
        """Plain-text row. The cursor glyph goes before the character under
        the cursor, or after the last one when the cursor is past the end."""
        if self.number is None:
            return FILLER
        text = self.text
        if self.cursor_col is not None:
            col = min(self.cursor_col, len(text))
            text = text[:col] + CURSOR_GLYPH + text[col:]
        return self.gutter + text


@dataclass(frozen=True, slots=True)
class Frame:
    lines: Tuple[FrameLine, ...]
    status: str
    cursor: Tuple[int, int]
    mode: EditorMode

    def render(self) -> str:
        return "\n".join([line.render() for line in self.lines] + [self.status])


def expand_tabs(text: str, tab_size: int) -> str:
    """Replace tabs with spaces up to the next multiple of ``tab_size``."""

    parts = []
    column = 0
    for ch in text:
        if ch == "\t":
            width = tab_size - (column % tab_size)
            parts.append(" " * width)
            column += width
        else:
            parts.append(ch)
            column += 1
    return "".join(parts)


def status_line(state: EditorState) -> str:
    row, col = state.cursor.position
    parts = [
        state.mode.label,
        state.status,
        f"{state.filename or '':<20}",
        f"({row + 1},{col + 1})",
    ]
    if state.modified:
        parts.append("[+]")
    return " ".join(parts)


def project(state: EditorState) -> Frame:
    """Derive the visible frame; never mutates ``state``."""

    tab_size = state.config.tab_size
    term = state.search.term
    cursor_row, cursor_col = state.cursor.position
    offset = state.cursor.offset_row
    rows = []
    for index in range(state.cursor.rows):
        line_no = offset + index
        if line_no >= state.buffer.line_count:
            rows.append(FrameLine(number=None))
            continue
        raw = state.buffer.get_line(line_no)
        text = expand_tabs(raw, tab_size)
        marker = None
        if line_no == cursor_row and state.mode is not EditorMode.NORMAL:
            marker = len(expand_tabs(raw[:cursor_col], tab_size))
        rows.append(
            FrameLine(
                number=line_no + 1,
                text=text,
                highlights=tuple(match_spans(text, term)),
                cursor_col=marker,
            )
        )
    return Frame(
        lines=tuple(rows),
        status=status_line(state),
        cursor=(cursor_row, cursor_col),
        mode=state.mode,
    )


__all__ = ["Frame", "FrameLine", "expand_tabs", "project", "status_line"]
