"""Value types for key bindings: strokes, sequences, actions, bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable


def _require(value: str, what: str) -> None:
    if not value:
        raise ValueError(f"{what} cannot be empty")


def _canonical_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    cleaned = {m.strip().lower() for m in modifiers} - {""}
    return tuple(sorted(cleaned))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """One key press. Its token is ``"x"`` or, with modifiers, ``"ctrl+x"``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _require(self.key, "key")
        object.__setattr__(self, "modifiers", _canonical_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        return "+".join((*self.modifiers, self.key))

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        # A lone "+" is a key, not a separator.
        head, sep, key = token.rpartition("+")
        if not sep or not head:
            return cls(token)
        return cls(key or "+", tuple(head.split("+")))


@dataclass(frozen=True, slots=True)
class KeySequence:
    strokes: tuple[KeyStroke, ...]

    def __post_init__(self) -> None:
        if not self.strokes:
            raise ValueError("KeySequence requires at least one stroke")

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(stroke.token for stroke in self.strokes)

    @classmethod
    def from_strings(cls, *keys: str) -> "KeySequence":
        return cls(tuple(KeyStroke.parse(key) for key in keys if key))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """An action handler, called as ``handler(state, match)``."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        _require(self.id, "action id")
        if not callable(self.handler):
            raise TypeError(f"handler for '{self.id}' must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Binds ``sequence`` in ``mode`` to the action named ``action_id``."""

    id: str
    mode: str
    sequence: KeySequence
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        _require(self.id, "binding id")
        _require(self.mode, "binding mode")
        _require(self.action_id, "binding action_id")

    @property
    def key_signature(self) -> str:
        return " ".join(self.sequence.tokens)


__all__ = ["KeyStroke", "KeySequence", "ActionRef", "Binding"]
