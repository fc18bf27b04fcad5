"""Mode switches and cursor motions bound in Normal mode."""

from __future__ import annotations

from tinyvim.keymaps.resolver import ResolutionMatch
from tinyvim.modes.base_mode import ModeResult
from tinyvim.state import EditorMode, EditorState


def enter_insert_mode(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to=EditorMode.INSERT, message="enter_insert")


def enter_search_mode(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to=EditorMode.SEARCH, message="enter_search")


def enter_replace_mode(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    if not state.search.has_term:
        state.status = "No search term to replace"
        return ModeResult(consumed=True, status="replace_unavailable")
    return ModeResult(
        consumed=True, switch_to=EditorMode.REPLACE, message="enter_replace"
    )


def _move(state: EditorState, d_row: int, d_col: int) -> ModeResult:
    state.cursor.move_by(state.buffer, d_row, d_col)
    return ModeResult(consumed=True, status="motion")


def move_left(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(state, 0, -1)


def move_right(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(state, 0, 1)


def move_up(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(state, -1, 0)


def move_down(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(state, 1, 0)


def page_up(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(state, -state.cursor.rows, 0)


def page_down(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(state, state.cursor.rows, 0)


def jump_top(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    state.cursor.jump_top(state.buffer)
    return ModeResult(consumed=True, status="motion")


def jump_bottom(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    state.cursor.jump_bottom(state.buffer)
    return ModeResult(consumed=True, status="motion")


def line_start(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    state.cursor.line_start()
    return ModeResult(consumed=True, status="motion")


def line_end(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    state.cursor.line_end(state.buffer)
    return ModeResult(consumed=True, status="motion")


__all__ = [
    "enter_insert_mode",
    "enter_search_mode",
    "enter_replace_mode",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "page_up",
    "page_down",
    "jump_top",
    "jump_bottom",
    "line_start",
    "line_end",
]
