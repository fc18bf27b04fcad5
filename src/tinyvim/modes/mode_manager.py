"""Mode manager: dispatches each key to the handler of the active mode."""

from __future__ import annotations

from typing import Dict, Optional, Type

from tinyvim.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from tinyvim.runtime import telemetry
from tinyvim.state import EditorMode, EditorState

from .base_mode import KeyInput, Mode, ModeResult
from .insert_mode import InsertMode
from .normal_mode import NormalMode
from .search_mode import ReplaceMode, SearchMode


class ModeManager:
    """Owns the editor state and routes events by ``state.mode``.

    Keys are processed strictly one at a time: the handler runs to
    completion, then any requested mode switch is applied.
    """

    def __init__(
        self,
        state: EditorState,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.state = state
        self._modes: Dict[EditorMode, Mode] = {}
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="tinyvim.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="tinyvim.keymaps"
        )

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._modes.get(self.state.mode)

    def register_mode(
        self, mode_cls: Type[Mode], /, *mode_args: object, **mode_kwargs: object
    ) -> Mode:
        mode = mode_cls(*mode_args, **mode_kwargs)
        if mode.mode in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.mode] = mode
        return mode

    def switch_mode(self, target: EditorMode) -> None:
        if target not in self._modes:
            raise KeyError(f"Unknown mode '{target.value}'")
        previous = self.state.mode
        if previous is target:
            return
        current = self._modes.get(previous)
        if current is not None:
            current.on_exit(self.state, target)
        self.state.mode = target
        self._modes[target].on_enter(self.state, previous)
        telemetry.record_event(
            "mode.switch", data={"from": previous.value, "mode": target.value}
        )
        self.state.bus.emit("mode.switch", target)

    def handle_key(self, key: KeyInput) -> ModeResult:
        if self.state.quit_requested:
            return ModeResult(consumed=False, status="closed")
        mode = self.active_mode
        if mode is None:
            raise RuntimeError(f"No handler registered for mode '{self.state.mode.value}'")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(self.state, key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


def create_default_manager(state: Optional[EditorState] = None) -> ModeManager:
    """Build a manager with all four modes and the built-in keymap."""

    manager = ModeManager(state or EditorState())
    manager.register_mode(NormalMode, manager.keymap_resolver)
    manager.register_mode(InsertMode)
    manager.register_mode(SearchMode)
    manager.register_mode(ReplaceMode)
    return manager


__all__ = ["ModeManager", "create_default_manager"]
