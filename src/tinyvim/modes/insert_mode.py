"""Insert mode: typed characters go straight into the buffer."""

from __future__ import annotations

from typing import Optional

from tinyvim.actions import editing
from tinyvim.state import EditorMode, EditorState

from .base_mode import KeyInput, Mode, ModeResult


class InsertMode(Mode):
    mode = EditorMode.INSERT

    def on_enter(self, state: EditorState, previous: Optional[EditorMode]) -> None:
        del previous
        state.status = "Insert mode"

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        if key.is_escape:
            # Land on the last typed character rather than after it.
            if state.cursor.col > 0:
                state.cursor.col -= 1
            state.status = "Normal mode"
            return ModeResult(
                consumed=True, switch_to=EditorMode.NORMAL, message="exit_insert"
            )

        if key.is_enter:
            changed = editing.insert_newline(state)
        elif key.is_backspace:
            changed = editing.backspace(state)
        elif key.key == "TAB":
            changed = editing.insert_tab(state)
        elif key.printable is not None:
            changed = editing.insert_character(state, key.printable)
        else:
            return ModeResult(consumed=False, status="miss", message="unhandled")

        state.clamp_cursor()
        return ModeResult(consumed=True, status="edit" if changed else "noop")
