"""Host-agnostic bridge between Textual key events and the mode manager."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from tinyvim.modes import KeyInput, ModeResult
from tinyvim.modes.mode_manager import ModeManager
from tinyvim.state import EditorState
from tinyvim.view import Frame, project


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


NAMED_KEYS: Dict[str, str] = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "ctrl+h": "BACKSPACE",
    "tab": "TAB",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "pageup": "PAGEUP",
    "pagedown": "PAGEDOWN",
}


def normalize_key(key: str, character: Optional[str] = None) -> Optional[KeyInput]:
    """Map a Textual key name (plus its character) onto a ``KeyInput``."""

    named = NAMED_KEYS.get(key.lower())
    if named is not None:
        return KeyInput(key=named)
    if key.startswith("ctrl+") and len(key) > len("ctrl+"):
        return KeyInput.ctrl(key[len("ctrl+"):])
    if character and len(character) == 1 and character.isprintable():
        return KeyInput.char(character)
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_frame: Callable[[Frame], None]
    request_exit: Callable[[], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Feeds keys into the ``ModeManager`` and pushes fresh frames out."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._subscribe_events()
        self._refresh()

    @property
    def state(self) -> EditorState:
        return self.manager.state

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[ModeResult]:
        normalized = normalize_key(key, character)
        if normalized is None:
            self._log_state("key dropped", key=key)
            return None
        return self.handle_key(normalized)

    def handle_key(self, key: KeyInput) -> ModeResult:
        self._log_state("key ->", key=key.key, mods=key.modifiers or None)
        result = self.manager.handle_key(key)
        self._refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        return result

    def resize(self, terminal_rows: int) -> None:
        config = self.state.config
        self.state.cursor.resize(config.viewport_height(terminal_rows))
        self._refresh()

    def frame(self) -> Frame:
        return project(self.state)

    def _subscribe_events(self) -> None:
        bus = self.state.bus
        for event in ("editor.quit", "editor.saved", "editor.save_failed", "mode.switch"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "editor.quit":
            self.hooks.request_exit()

    def _refresh(self) -> None:
        self.hooks.update_frame(self.frame())

    def _log_state(self, prefix: str, **fields: object) -> None:
        state = self.state
        snapshot: Dict[str, object] = {
            "mode": state.mode.value,
            "cursor": state.cursor.position,
            "pending": " ".join(state.pending_keys),
            "modified": state.modified,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = [
    "NAMED_KEYS",
    "TextualEditorAdapter",
    "TextualUIHooks",
    "normalize_key",
]
