"""Save and quit commands, including the ``:``-prefixed forms."""

from __future__ import annotations

from tinyvim.buffer.files import FileSaveError, save_lines
from tinyvim.keymaps.resolver import ResolutionMatch
from tinyvim.modes.base_mode import ModeResult
from tinyvim.runtime import telemetry
from tinyvim.state import EditorState


def _save(state: EditorState) -> bool:
    path = state.filename or state.config.default_save_path
    try:
        save_lines(path, state.buffer.snapshot())
    except FileSaveError as exc:
        state.status = f"Error saving file: {exc}"
        telemetry.record_event(
            "file.save_failed", level="error", data={"path": exc.path, "reason": str(exc)}
        )
        state.bus.emit("editor.save_failed", {"path": exc.path, "reason": str(exc)})
        return False
    state.modified = False
    state.status = "File saved successfully"
    state.bus.emit("editor.saved", {"path": path})
    return True


def write_buffer(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    saved = _save(state)
    return ModeResult(
        consumed=True,
        status="command_write" if saved else "command_write_failed",
        message=state.status,
    )


def quit_editor(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    if state.modified:
        state.status = "Unsaved changes. Use :q! to force quit."
        return ModeResult(consumed=True, status="quit_refused", message=state.status)
    state.request_quit(force=False)
    return ModeResult(consumed=True, status="command_quit", message="quit")


def force_quit(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    state.request_quit(force=True)
    return ModeResult(consumed=True, status="command_quit_force", message="quit!")


def write_and_quit(state: EditorState, match: ResolutionMatch) -> ModeResult:
    del match
    if not _save(state):
        return ModeResult(
            consumed=True, status="command_write_failed", message=state.status
        )
    state.request_quit(force=False)
    return ModeResult(consumed=True, status="command_x", message="x")


__all__ = ["write_buffer", "quit_editor", "force_quit", "write_and_quit"]
