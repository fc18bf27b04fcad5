"""Search repetition and the confirm steps of the Search/Replace prompts."""

from __future__ import annotations

from typing import Callable, Optional

from tinyvim.buffer.document import TextBuffer
from tinyvim.buffer.state import Cursor
from tinyvim.keymaps.resolver import ResolutionMatch
from tinyvim.modes.base_mode import ModeResult
from tinyvim.runtime import telemetry
from tinyvim.search import count_occurrences, find_next, find_previous, replace_all
from tinyvim.state import EditorState

Finder = Callable[[TextBuffer, int, int, str], Optional[Cursor]]


def _jump(state: EditorState, finder: Finder) -> bool:
    term = state.search.term
    if not term:
        state.status = "No previous search term"
        return False
    found = finder(state.buffer, state.cursor.row, state.cursor.col, term)
    if found is None:
        state.status = f"Pattern not found: {term}"
        telemetry.record_event("search.miss", data={"term": term})
        return False
    state.cursor.set_position(state.buffer, *found)
    state.status = f"/{term}"
    return True


def search_forward(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    found = _jump(state, find_next)
    return ModeResult(consumed=True, status="search_hit" if found else "search_miss")


def search_backward(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    found = _jump(state, find_previous)
    return ModeResult(consumed=True, status="search_hit" if found else "search_miss")


def submit_search(state: EditorState) -> bool:
    """Persist the typed term and jump to its next occurrence."""

    state.search.confirm_search()
    return _jump(state, find_next)


def submit_replace(state: EditorState) -> int:
    """Replace every occurrence of the persisted term; return the count."""

    term = state.search.term
    replacement = state.search.replacement
    state.search.replacement = ""
    # Replace-all is undoable as one step, only when something changes.
    if term != replacement and count_occurrences(state.buffer, term):
        state.checkpoint("replace_all")
    count = replace_all(state.buffer, term, replacement)
    if count:
        state.mark_modified()
        state.clamp_cursor()
    state.status = f"Replaced {count} occurrences"
    telemetry.record_event(
        "search.replace_all",
        data={"term": term, "replacement": replacement, "count": count},
    )
    return count


__all__ = ["search_forward", "search_backward", "submit_search", "submit_replace"]
