"""Normal mode: every key is looked up in the built-in keymap."""

from __future__ import annotations

from typing import Optional

from tinyvim.keymaps import KeymapResolver
from tinyvim.state import EditorMode, EditorState

from .base_mode import KeyInput, Mode, ModeResult
from .keymap_helpers import execute_match, key_to_token


class NormalMode(Mode):
    mode = EditorMode.NORMAL

    def __init__(self, resolver: KeymapResolver) -> None:
        self._resolver = resolver

    def on_enter(self, state: EditorState, previous: Optional[EditorMode]) -> None:
        del previous
        state.pending_keys = ()

    def on_exit(self, state: EditorState, next_mode: Optional[EditorMode]) -> None:
        del next_mode
        state.pending_keys = ()

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        tokens = state.pending_keys + (key_to_token(key),)
        result = self._resolver.resolve(self.name, tokens)

        if result.status == "match" and result.match:
            state.pending_keys = ()
            return execute_match(state, result.match)

        if result.status == "pending":
            # A prefix such as ":" stays armed until the next key arrives.
            state.pending_keys = tokens
            state.status = "".join(tokens)
            return ModeResult(
                consumed=True, status="pending", message="awaiting_sequence"
            )

        if state.pending_keys:
            state.pending_keys = ()
            state.status = "Normal mode"
            return self.handle_key(state, key)

        return ModeResult(consumed=False, status="miss", message="unbound")
