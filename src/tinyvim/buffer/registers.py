"""Single-slot register holding the last yanked or deleted line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class Register:
    """Overwritten on every yank/delete; pasting reads without clearing.

    ``text`` is ``None`` until something has been stored, so an empty line
    can still be yanked and pasted.
    """

    text: Optional[str] = None

    def store(self, text: str) -> None:
        self.text = text

    def get(self) -> Optional[str]:
        return self.text

