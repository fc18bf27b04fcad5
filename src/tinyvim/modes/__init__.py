"""Modal input handling: Normal, Insert, Search, and Replace."""

from .base_mode import KeyInput, Mode, ModeResult
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .search_mode import ReplaceMode, SearchMode

__all__ = [
    "KeyInput",
    "Mode",
    "ModeResult",
    "NormalMode",
    "InsertMode",
    "SearchMode",
    "ReplaceMode",
]
