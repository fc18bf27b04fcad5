"""Registry of the editor's actions and the key bindings that invoke them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from tinyvim.runtime.telemetry import span

from .models import ActionRef, Binding


@dataclass(slots=True)
class RegistryStats:
    action_count: int
    binding_count: int
    modes: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Two bindings claim the same keys in the same mode."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        self.binding = binding
        self.conflicts = tuple(conflicts)
        taken = ", ".join(repr(b.id) for b in self.conflicts)
        super().__init__(
            f"Keys '{binding.key_signature}' of binding '{binding.id}' "
            f"in mode '{binding.mode}' are already bound by {taken}"
        )


class KeymapRegistry:
    """Actions by id, bindings by id, and a per-mode index of key signatures.

    ``revision`` increases on every binding change so resolvers know when to
    rebuild their tries.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_keys: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        if action_id not in self._actions:
            raise KeyError(f"Action '{action_id}' is not registered")
        return self._actions[action_id]

    def get_binding(self, binding_id: str) -> Binding:
        if binding_id not in self._bindings:
            raise KeyError(f"Binding '{binding_id}' is not registered")
        return self._bindings[binding_id]

    def register_action(self, action: ActionRef) -> ActionRef:
        if action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding) -> Binding:
        """Add ``binding`` to its mode's index.

        Raises ``KeyError`` for an unknown action, ``KeymapConflictError`` when
        the keys are taken and ``ValueError`` when the id is taken.
        """

        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            metadata={"binding_id": binding.id, "keys": binding.key_signature},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )
            conflict = self.find_conflict(binding)
            if conflict is not None:
                raise KeymapConflictError(binding, [conflict])
            if binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            self._bindings[binding.id] = binding
            self._by_keys.setdefault(binding.mode, {})[binding.key_signature] = binding.id
            self._revision += 1
            return binding

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            return iter(list(self._bindings.values()))
        ids = list(self._by_keys.get(mode, {}).values())
        return (self._bindings[binding_id] for binding_id in ids)

    def find_conflict(self, binding: Binding) -> Optional[Binding]:
        """Return the other binding already holding ``binding``'s keys, if any."""

        holder = self._by_keys.get(binding.mode, {}).get(binding.key_signature)
        if holder is None or holder == binding.id:
            return None
        return self._bindings[holder]

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            modes=tuple(sorted(self._by_keys)),
        )


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]
