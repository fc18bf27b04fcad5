"""Snapshot-based linear undo/redo history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .document import TextBuffer
from .state import Cursor, CursorModel


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Immutable copy of buffer lines and cursor position."""

    lines: Tuple[str, ...]
    cursor: Cursor

    @classmethod
    def capture(cls, buffer: TextBuffer, cursor: CursorModel) -> "Snapshot":
        return cls(lines=tuple(buffer.snapshot()), cursor=cursor.position)

    def to_buffer(self) -> TextBuffer:
        return TextBuffer.from_lines(self.lines)


class HistoryStack:
    """Two stacks of snapshots; a new checkpoint invalidates the redo stack."""

    def __init__(self) -> None:
        self._undo: List[Snapshot] = []
        self._redo: List[Snapshot] = []

    def checkpoint(self, buffer: TextBuffer, cursor: CursorModel) -> Snapshot:
        snapshot = Snapshot.capture(buffer, cursor)
        self._undo.append(snapshot)
        self._redo.clear()
        return snapshot

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def undo(self, current: Snapshot) -> Optional[Snapshot]:
        """Park ``current`` on the redo stack and return the state to restore."""

        if not self._undo:
            return None
        self._redo.append(current)
        return self._undo.pop()

    def redo(self, current: Snapshot) -> Optional[Snapshot]:
        if not self._redo:
            return None
        self._undo.append(current)
        return self._redo.pop()
