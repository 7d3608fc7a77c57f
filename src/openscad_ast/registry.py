"""Mapping of node kinds to the adapters that build them.

An adapter is a plain callable ``adapter(cursor, recurse) -> ASTNode``. It is
handed a cursor positioned on the construct and a ``recurse`` callable that
adapts any descendant ``SyntaxNode`` through the same dispatch.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping, Optional

from .errors import RegistryError
from .nodes import ASTNode, NodeKind, Unknown
from .position import extract_position

logger = logging.getLogger(__name__)

Adapter = Callable[..., ASTNode]


def adapt_unknown(cursor, recurse) -> Unknown:
    """Fallback adapter: an ``Unknown`` node spanning the construct."""
    return Unknown(position=extract_position(cursor))


class AdapterRegistry:
    """Table of adapters keyed by ``NodeKind``.

    Lookups for kinds without an adapter return ``adapt_unknown``. Once
    frozen, the table rejects further registrations.
    """

    def __init__(self, adapters: Optional[Mapping[NodeKind, Adapter]] = None):
        self._adapters: dict[NodeKind, Adapter] = {}
        self._frozen = False
        for kind, adapter in (adapters or {}).items():
            self.register(kind, adapter)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, kind: NodeKind, adapter: Adapter) -> None:
        if self._frozen:
            raise RegistryError(f"cannot register {kind!s}: registry is frozen")
        kind = NodeKind(kind)
        if not callable(adapter):
            raise TypeError(f"adapter for {kind.value} is not callable: {adapter!r}")
        self._adapters[kind] = adapter

    def lookup(self, kind: NodeKind) -> Adapter:
        return self._adapters.get(kind, adapt_unknown)

    def freeze(self) -> AdapterRegistry:
        self._frozen = True
        return self

    def kinds(self) -> frozenset[NodeKind]:
        return frozenset(self._adapters)

    def __contains__(self, kind) -> bool:
        return kind in self._adapters

    def __len__(self) -> int:
        return len(self._adapters)

    def __repr__(self):
        state = "frozen" if self._frozen else "open"
        return f"<AdapterRegistry {len(self)} kinds, {state}>"


def check_exhaustive(registry: AdapterRegistry, kinds: Iterable[NodeKind] = NodeKind) -> None:
    """Raise ``RegistryError`` naming every kind ``registry`` cannot adapt."""
    missing = sorted(kind.value for kind in kinds if kind not in registry)
    if missing:
        raise RegistryError(f"no adapter registered for: {', '.join(missing)}")


def build_default_registry() -> AdapterRegistry:
    """Build and freeze the registry holding every built-in adapter."""
    from .adapters import ADAPTERS

    registry = AdapterRegistry(ADAPTERS)
    check_exhaustive(registry)
    logger.debug("built default adapter registry with %d kinds", len(registry))
    return registry.freeze()


# Module-level cache for the default registry
_default_registry: Optional[AdapterRegistry] = None


def default_registry() -> AdapterRegistry:
    """Return the shared, frozen default registry, building it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = build_default_registry()
    return _default_registry
