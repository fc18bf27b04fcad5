"""Base classes and shared value types for editor modes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from tinyvim.state import EditorMode, EditorState

ESCAPE_KEYS = frozenset({"ESC", "<Esc>"})
ENTER_KEYS = frozenset({"ENTER", "RETURN"})


@dataclass(slots=True)
class KeyInput:
    """Normalized key event: a named key or a single printable character."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @classmethod
    def char(cls, ch: str) -> "KeyInput":
        return cls(key=ch, text=ch)

    @classmethod
    def ctrl(cls, letter: str) -> "KeyInput":
        return cls(key=letter, modifiers=("ctrl",))

    @property
    def printable(self) -> Optional[str]:
        """The typed character, or ``None`` for named/modified keys."""

        if self.modifiers or self.text is None or len(self.text) != 1:
            return None
        return self.text if self.text.isprintable() else None

    @property
    def is_escape(self) -> bool:
        return self.key in ESCAPE_KEYS

    @property
    def is_enter(self) -> bool:
        return self.key in ENTER_KEYS

    @property
    def is_backspace(self) -> bool:
        return self.key == "BACKSPACE"


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[EditorMode] = None
    status: str = "ok"
    message: Optional[str] = None


class Mode:
    """Stateless handler set for one ``EditorMode``; state arrives per call."""

    mode: EditorMode = EditorMode.NORMAL

    @property
    def name(self) -> str:
        return self.mode.value

    def on_enter(self, state: EditorState, previous: Optional[EditorMode]) -> None:
        del state, previous

    def on_exit(self, state: EditorState, next_mode: Optional[EditorMode]) -> None:
        del state, next_mode

    def handle_key(
        self, state: EditorState, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError
