"""Search prompt mode (``/``) and the Replace prompt built on the same idea."""

from __future__ import annotations

from typing import Optional

from tinyvim.actions.search import submit_replace, submit_search
from tinyvim.state import EditorMode, EditorState

from .base_mode import KeyInput, Mode, ModeResult

SEARCH_PROMPT = "/"
REPLACE_PROMPT = "Replace with: "


class SearchMode(Mode):
    """Edits a draft term; the confirmed term only changes on Enter."""

    mode = EditorMode.SEARCH

    def on_enter(self, state: EditorState, previous: Optional[EditorMode]) -> None:
        del previous
        state.search.begin_search()
        self._sync_status(state)

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        if key.is_escape:
            state.search.abandon_search()
            state.status = "Normal mode"
            return ModeResult(
                consumed=True, switch_to=EditorMode.NORMAL, message="search_cancel"
            )

        if key.is_enter:
            found = submit_search(state)
            return ModeResult(
                consumed=True,
                switch_to=EditorMode.NORMAL,
                status="search_hit" if found else "search_miss",
                message=state.search.term,
            )

        if key.is_backspace:
            state.search.draft = state.search.draft[:-1]
            self._sync_status(state)
            return ModeResult(consumed=True, status="editing")

        if key.printable is not None:
            state.search.draft += key.printable
            self._sync_status(state)
            return ModeResult(consumed=True, status="editing")

        return ModeResult(consumed=False, status="miss", message="unhandled")

    @staticmethod
    def _sync_status(state: EditorState) -> None:
        state.status = SEARCH_PROMPT + state.search.draft


class ReplaceMode(Mode):
    """Collects replacement text for the persisted search term."""

    mode = EditorMode.REPLACE

    def on_enter(self, state: EditorState, previous: Optional[EditorMode]) -> None:
        del previous
        state.search.begin_replace()
        self._sync_status(state)

    def handle_key(self, state: EditorState, key: KeyInput) -> ModeResult:
        if key.is_escape:
            state.search.abandon_replace()
            state.status = "Normal mode"
            return ModeResult(
                consumed=True, switch_to=EditorMode.NORMAL, message="replace_cancel"
            )

        if key.is_enter:
            count = submit_replace(state)
            return ModeResult(
                consumed=True,
                switch_to=EditorMode.NORMAL,
                status="replace_all",
                message=str(count),
            )

        if key.is_backspace:
            state.search.replacement = state.search.replacement[:-1]
            self._sync_status(state)
            return ModeResult(consumed=True, status="editing")

        if key.printable is not None:
            state.search.replacement += key.printable
            self._sync_status(state)
            return ModeResult(consumed=True, status="editing")

        return ModeResult(consumed=False, status="miss", message="unhandled")

    @staticmethod
    def _sync_status(state: EditorState) -> None:
        state.status = REPLACE_PROMPT + state.search.replacement
