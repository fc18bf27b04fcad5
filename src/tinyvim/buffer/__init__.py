"""Line buffer, cursor, register, and undo/redo data structures."""

from .document import Line, TextBuffer
from .files import FileSaveError, load_lines, save_lines, serialize_lines
from .registers import Register
from .state import Cursor, CursorModel
from .undo import HistoryStack, Snapshot

__all__ = [
    "Line",
    "TextBuffer",
    "Cursor",
    "CursorModel",
    "Register",
    "HistoryStack",
    "Snapshot",
    "FileSaveError",
    "load_lines",
    "save_lines",
    "serialize_lines",
]
