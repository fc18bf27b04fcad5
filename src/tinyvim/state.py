"""The single mutable editor state threaded through every mode handler."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, Optional, Tuple

from tinyvim.buffer import (
    CursorModel,
    HistoryStack,
    Register,
    Snapshot,
    TextBuffer,
    load_lines,
)
from tinyvim.config import EditorConfig
from tinyvim.runtime import telemetry
from tinyvim.search import SearchState


class EditorMode(Enum):
    """Input-interpretation modes; exactly one is active at a time."""

    NORMAL = "normal"
    INSERT = "insert"
    SEARCH = "search"
    REPLACE = "replace"

    @property
    def label(self) -> str:
        return self.value.upper()


class ModeBus:
    """Minimal event bus letting handlers signal the host (quit, save, ...)."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass
class EditorState:
    buffer: TextBuffer = field(default_factory=TextBuffer)
    cursor: CursorModel = field(default_factory=CursorModel)
    history: HistoryStack = field(default_factory=HistoryStack)
    register: Register = field(default_factory=Register)
    search: SearchState = field(default_factory=SearchState)
    config: EditorConfig = field(default_factory=EditorConfig)
    bus: ModeBus = field(default_factory=ModeBus)
    mode: EditorMode = EditorMode.NORMAL
    filename: Optional[str] = None
    status: str = "Normal mode"
    modified: bool = False
    pending_keys: Tuple[str, ...] = ()
    quit_requested: bool = False

    def __post_init__(self) -> None:
        if self.cursor.height is None:
            self.cursor.height = self.config.default_height
        self.clamp_cursor()

    @classmethod
    def open(
        cls, path: Optional[str] = None, *, config: Optional[EditorConfig] = None
    ) -> "EditorState":
        """Load ``path`` (falling back to one empty line) into a fresh state."""

        return cls.from_lines(load_lines(path), config=config, filename=path or None)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        *,
        config: Optional[EditorConfig] = None,
        filename: Optional[str] = None,
    ) -> "EditorState":
        return cls(
            buffer=TextBuffer.from_lines(lines),
            config=config or EditorConfig(),
            filename=filename,
        )

    def current_line(self) -> str:
        return self.buffer.get_line(self.cursor.row)

    def snapshot(self) -> Snapshot:
        return Snapshot.capture(self.buffer, self.cursor)

    def checkpoint(self, label: str) -> None:
        """Record the pre-edit state; must run before the edit is applied."""

        self.history.checkpoint(self.buffer, self.cursor)
        telemetry.record_event(
            "history.checkpoint",
            level="debug",
            data={"label": label, "depth": self.history.undo_depth},
        )

    def restore(self, snapshot: Snapshot) -> None:
        self.buffer = snapshot.to_buffer()
        self.cursor.row, self.cursor.col = snapshot.cursor
        self.clamp_cursor()

    def clamp_cursor(self) -> None:
        self.cursor.clamp(self.buffer)
        self.cursor.adjust_viewport()

    def mark_modified(self) -> None:
        self.modified = True

    def request_quit(self, *, force: bool) -> None:
        self.quit_requested = True
        telemetry.record_event(
            "editor.quit", data={"force": force, "modified": self.modified}
        )
        self.bus.emit("editor.quit", {"force": force})


__all__ = ["EditorMode", "EditorState", "ModeBus"]
