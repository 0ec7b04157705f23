"""
Type-tag and identity registries owned by a Manager.

The two tables disagree on duplicates: a type tag keeps its
first registration, while an identity key is overwritten by the newest
node (the previous occupant keeps its manager reference).
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, Callable, Optional

from .errors import (
    DuplicateObjectError,
    DuplicateTypeError,
    UnknownObjectError,
    UnknownTypeError,
    report,
)

if TYPE_CHECKING:
    from .manager import Manager
    from .node import Node

logger = logging.getLogger(__name__)

DEFAULT_SCOPE = "global"

Factory = Callable[[dict], "Node"]


class TypeRegistry:
    """
    Maps type tags to node factories.

    Usage:
        types = TypeRegistry()
        types.add('rect', NodeFactory('rect', NAMESPACED))
        factory = types.get('rect')
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._factories: dict[str, Factory] = {}
        self._lock = threading.RLock()

    def add(self, tag: str, factory: Factory) -> None:
        """Register a factory under ``tag``. The first registration wins."""
        with self._lock:
            if tag in self._factories:
                report(logger, DuplicateTypeError,
                       "Manager: xtype named %s has already been added.", tag,
                       strict=self.strict)
                return
            self._factories[tag] = factory

    def remove(self, tag: str) -> None:
        with self._lock:
            if tag not in self._factories:
                report(logger, UnknownTypeError,
                       "Manager: xtype named %s is not defined.", tag,
                       strict=self.strict)
                return
            del self._factories[tag]

    def get(self, tag: str) -> Optional[Factory]:
        """Return the factory for ``tag``, or None (with a warning) if absent."""
        with self._lock:
            factory = self._factories.get(tag)
        if factory is None:
            report(logger, UnknownTypeError,
                   "Manager: xtype named %s is not defined.", tag,
                   strict=self.strict)
        return factory

    def tags(self) -> list[str]:
        with self._lock:
            return list(self._factories)

    def __contains__(self, tag: str) -> bool:
        with self._lock:
            return tag in self._factories

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)


class IdentityRegistry:
    """
    Maps ``scope:id`` keys to the live node using that identity.

    Adding a node sets its ``manager`` back-reference to the owner of this
    registry; removing the key clears it again.
    """

    def __init__(self, owner: Optional[Manager] = None, strict: bool = False):
        self.owner = owner
        self.strict = strict
        self._objects: dict[str, Any] = {}
        self._lock = threading.RLock()

    @staticmethod
    def key(id: str, scope: str = DEFAULT_SCOPE) -> str:
        return f"{scope}:{id}"

    def add(self, id: str, node: Node, scope: str = DEFAULT_SCOPE) -> None:
        """Register ``node`` under (scope, id), overwriting any previous occupant."""
        key = self.key(id, scope)
        with self._lock:
            previous = self._objects.get(key)
            if previous is not None and previous is not node:
                report(logger, DuplicateObjectError,
                       "Manager: object named %s has already been added.", id,
                       strict=self.strict)
            node.manager = self.owner
            self._objects[key] = node

    def remove(self, id: str, scope: str = DEFAULT_SCOPE) -> None:
        key = self.key(id, scope)
        with self._lock:
            node = self._objects.pop(key, None)
        if node is None:
            report(logger, UnknownObjectError,
                   "Manager: object named %s is not defined.", id,
                   strict=self.strict)
            return
        node.manager = None

    def get(self, id: str, scope: str = DEFAULT_SCOPE) -> Optional[Node]:
        """Look up a node. Misses are silent."""
        with self._lock:
            return self._objects.get(self.key(id, scope))

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._objects)

    def __contains__(self, key: tuple[str, str]) -> bool:
        """Check if an identity is taken: ('r1', 'global') in registry"""
        id, scope = key
        return self.get(id, scope) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._objects)
