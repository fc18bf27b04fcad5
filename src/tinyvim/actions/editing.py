"""Buffer-mutating verbs: line operations, history, and Insert-mode edits.

Every edit except ``delete_char_under_cursor`` records a history checkpoint
immediately before it touches the buffer, one checkpoint per edit.
"""

from __future__ import annotations

from tinyvim.keymaps.resolver import ResolutionMatch
from tinyvim.modes.base_mode import ModeResult
from tinyvim.runtime import telemetry
from tinyvim.state import EditorState


def delete_char_under_cursor(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    # No checkpoint here; this edit is not undoable.
    row, col = state.cursor.position
    if not state.buffer.delete_char(row, col):
        return ModeResult(consumed=True, status="noop")
    state.mark_modified()
    state.clamp_cursor()
    return ModeResult(consumed=True, status="delete_char")


def delete_line(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    row = state.cursor.row
    state.register.store(state.current_line())
    if state.buffer.line_count <= 1:
        state.status = "Cannot delete the only line"
        return ModeResult(consumed=True, status="noop")
    state.checkpoint("delete_line")
    state.buffer.delete_line(row)
    state.mark_modified()
    state.clamp_cursor()
    state.status = "Line deleted"
    return ModeResult(consumed=True, status="delete_line")


def yank_line(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    state.register.store(state.current_line())
    state.status = "Line yanked to clipboard"
    return ModeResult(consumed=True, status="yank")


def paste_below(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    text = state.register.get()
    if text is None:
        return ModeResult(consumed=True, status="noop")
    state.checkpoint("paste")
    state.buffer.insert_line_after(state.cursor.row, text)
    state.cursor.row += 1
    state.mark_modified()
    state.clamp_cursor()
    state.status = "Line pasted from clipboard"
    return ModeResult(consumed=True, status="paste")


def undo(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    snapshot = state.history.undo(state.snapshot())
    if snapshot is None:
        state.status = "Nothing to undo"
        return ModeResult(consumed=True, status="noop")
    state.restore(snapshot)
    state.mark_modified()
    state.status = "Undo performed"
    telemetry.record_event(
        "history.undo", level="debug", data={"depth": state.history.undo_depth}
    )
    return ModeResult(consumed=True, status="undo")


def redo(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    snapshot = state.history.redo(state.snapshot())
    if snapshot is None:
        state.status = "Nothing to redo"
        return ModeResult(consumed=True, status="noop")
    state.restore(snapshot)
    state.mark_modified()
    state.status = "Redo performed"
    telemetry.record_event(
        "history.redo", level="debug", data={"depth": state.history.redo_depth}
    )
    return ModeResult(consumed=True, status="redo")


def insert_character(state: EditorState, ch: str) -> bool:
    row, col = state.cursor.position
    state.checkpoint("insert_char")
    state.buffer.insert_char(row, col, ch)
    state.cursor.col = col + 1
    state.mark_modified()
    return True


def insert_newline(state: EditorState) -> bool:
    row, col = state.cursor.position
    state.checkpoint("split_line")
    state.buffer.split_line(row, col)
    state.cursor.row, state.cursor.col = row + 1, 0
    state.mark_modified()
    return True


def backspace(state: EditorState) -> bool:
    row, col = state.cursor.position
    if col > 0:
        state.checkpoint("delete_char")
        state.buffer.delete_char(row, col - 1)
        state.cursor.col = col - 1
    elif row > 0:
        joined_at = state.buffer.line_length(row - 1)
        state.checkpoint("join_line")
        state.buffer.join_with_previous(row)
        state.cursor.row, state.cursor.col = row - 1, joined_at
    else:
        return False
    state.mark_modified()
    return True


def insert_tab(state: EditorState) -> bool:
    """Pad with spaces up to the next tab stop as a single undoable edit."""

    row, col = state.cursor.position
    tab_size = state.config.tab_size
    width = tab_size - (col % tab_size)
    state.checkpoint("tab")
    for offset in range(width):
        state.buffer.insert_char(row, col + offset, " ")
    state.cursor.col = col + width
    state.mark_modified()
    return True


__all__ = [
    "delete_char_under_cursor",
    "delete_line",
    "yank_line",
    "paste_below",
    "undo",
    "redo",
    "insert_character",
    "insert_newline",
    "backspace",
    "insert_tab",
]
