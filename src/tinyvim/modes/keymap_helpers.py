"""Helpers bridging key events and the keymap resolver."""

from __future__ import annotations

from tinyvim.keymaps import ResolutionMatch
from tinyvim.runtime import telemetry
from tinyvim.state import EditorState

from .base_mode import KeyInput, ModeResult


def key_to_token(key: KeyInput) -> str:
    if key.modifiers:
        modifiers = sorted(dict.fromkeys(m.strip().lower() for m in key.modifiers))
        return "+".join(modifiers + [key.key])
    return key.key


def execute_match(state: EditorState, match: ResolutionMatch) -> ModeResult:
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"binding_id": match.binding.id, "action": match.action.id},
    ):
        outcome = match.action(state, match)

    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)


__all__ = ["key_to_token", "execute_match"]
