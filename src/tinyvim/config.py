"""Editor configuration resolved from defaults and ``TINYVIM_*`` variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "TINYVIM_"


def _env_int(env: Mapping[str, str], name: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{name}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(frozen=True, slots=True)
class EditorConfig:
    tab_size: int = 4
    status_rows: int = 2
    default_save_path: str = "samples/output.txt"
    # Used until the host reports a real terminal size.
    default_height: int = 22

    def __post_init__(self) -> None:
        if self.tab_size <= 0:
            raise ValueError("tab_size must be positive")
        if self.status_rows < 0:
            raise ValueError("status_rows cannot be negative")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        source = os.environ if env is None else env
        defaults = cls()
        tab_size = _env_int(source, "TAB_SIZE", defaults.tab_size)
        status_rows = _env_int(source, "STATUS_ROWS", defaults.status_rows)
        return cls(
            tab_size=tab_size if tab_size > 0 else defaults.tab_size,
            status_rows=status_rows if status_rows >= 0 else defaults.status_rows,
            default_save_path=source.get(
                f"{ENV_PREFIX}DEFAULT_SAVE_PATH", defaults.default_save_path
            ),
        )

    def viewport_height(self, terminal_rows: int) -> int:
        return max(1, terminal_rows - self.status_rows)


__all__ = ["EditorConfig"]
