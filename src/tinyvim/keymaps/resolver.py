"""Turns the keys typed so far into a match, a pending prefix, or a miss."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Sequence, Tuple

from tinyvim.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry

Status = Literal["match", "pending", "miss"]


@dataclass(slots=True)
class TrieNode:
    binding_id: Optional[str] = None
    children: Dict[str, "TrieNode"] = field(default_factory=dict)


@dataclass(slots=True)
class KeymapTrie:
    """Prefix tree over the token sequences bound in one mode."""

    mode: str
    root: TrieNode = field(default_factory=TrieNode)

    @classmethod
    def build(cls, mode: str, bindings: Sequence[Binding]) -> "KeymapTrie":
        trie = cls(mode=mode)
        for binding in bindings:
            node = trie.root
            for token in binding.sequence.tokens:
                node = node.children.setdefault(token, TrieNode())
            node.binding_id = binding.id
        return trie

    def walk(self, tokens: Sequence[str]) -> Tuple[Optional[TrieNode], int]:
        """Follow ``tokens``; return the final node (``None`` if the path
        breaks) and how many tokens were accepted."""

        node = self.root
        for depth, token in enumerate(tokens):
            nxt = node.children.get(token)
            if nxt is None:
                return None, depth
            node = nxt
        return node, len(tokens)


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """``pending`` carries the tokens that would extend the prefix."""

    status: Status
    match: Optional[ResolutionMatch] = None
    consumed: int = 0
    next_expected: tuple[str, ...] = ()


class KeymapResolver:
    """Resolves against per-mode tries, rebuilt when the registry changes."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._tries: Dict[str, tuple[int, KeymapTrie]] = {}

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(self, mode: str, tokens: Sequence[str]) -> ResolutionResult:
        keys = tuple(tokens)
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            metadata={"mode": mode, "keys": " ".join(keys)},
        ) as handle:
            result = self._lookup(mode, keys)
            handle.add_metadata("status", result.status)
            return result

    def _lookup(self, mode: str, keys: tuple[str, ...]) -> ResolutionResult:
        node, consumed = self._trie(mode).walk(keys)
        if node is None or not keys:
            return ResolutionResult(status="miss", consumed=consumed)
        if node.binding_id is not None:
            binding = self._registry.get_binding(node.binding_id)
            return ResolutionResult(
                status="match",
                match=ResolutionMatch(
                    binding=binding,
                    action=self._registry.get_action(binding.action_id),
                ),
                consumed=consumed,
            )
        if node.children:
            return ResolutionResult(
                status="pending",
                consumed=consumed,
                next_expected=tuple(sorted(node.children)),
            )
        return ResolutionResult(status="miss", consumed=consumed)

    def _trie(self, mode: str) -> KeymapTrie:
        revision = self._registry.revision()
        cached = self._tries.get(mode)
        if cached is None or cached[0] != revision:
            trie = KeymapTrie.build(mode, list(self._registry.iter_bindings(mode)))
            cached = (revision, trie)
            self._tries[mode] = cached
        return cached[1]


__all__ = [
    "KeymapResolver",
    "KeymapTrie",
    "ResolutionResult",
    "ResolutionMatch",
]
