"""Load and save primitives between text files and buffer lines."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from tinyvim.runtime import telemetry


class FileSaveError(RuntimeError):
    """Raised when the buffer cannot be written to disk."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


def load_lines(path: str | None) -> List[str]:
    """Read ``path`` split on line feeds, or ``[""]`` if it cannot be read."""

    if not path:
        return [""]
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        telemetry.record_event(
            "file.load_fallback",
            level="warning",
            data={"path": path, "reason": str(exc)},
        )
        return [""]
    lines = text.split("\n")
    telemetry.record_event("file.load", data={"path": path, "lines": len(lines)})
    return lines


def serialize_lines(lines: Sequence[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def save_lines(path: str, lines: Sequence[str]) -> int:
    """Write every line followed by a line feed; return the bytes written."""

    data = serialize_lines(lines).encode("utf-8")
    try:
        Path(path).write_bytes(data)
    except OSError as exc:
        raise FileSaveError(exc.strerror or str(exc), path=path) from exc
    telemetry.record_event("file.save", data={"path": path, "bytes": len(data)})
    return len(data)


__all__ = ["FileSaveError", "load_lines", "save_lines", "serialize_lines"]
