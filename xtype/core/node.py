"""
Base node: declarative payloads, children and the render/clear/destroy walk.

A node is built from a plain config mapping. Rendering creates a backing
element through the node's strategy, attaches it under ``host``, applies
the payloads in a fixed order and then creates and renders every child
with the new element as its host.

State machine:
    Unattached --render--> Attached --clear--> Cleared --render--> Attached
    any --destroy--> Destroyed
"""

from __future__ import annotations

import itertools
import logging
import threading
import weakref
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from ..dom import Document, Element
from .errors import RenderError, report
from .registry import DEFAULT_SCOPE
from .strategies import PLAIN, ElementCreationStrategy

if TYPE_CHECKING:
    from .manager import Manager

logger = logging.getLogger(__name__)

# Generated ids count down: Rect-1, Rect-2, ...
_id_counter = itertools.count(-1, -1)


def generate_id(prefix: str) -> str:
    return f"{prefix}{next(_id_counter)}"


def _copy(value: Optional[Mapping]) -> Optional[dict]:
    return dict(value) if value else None


def _option(config: Mapping[str, Any], *keys: str) -> Any:
    """First non-None value among ``keys`` (snake_case name, then camelCase alias)."""
    for key in keys:
        value = config.get(key)
        if value is not None:
            return value
    return None


def _class_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return " ".join(str(name) for name in value)


Child = Union["Node", Mapping[str, Any]]


class Node:
    """
    A live, stateful element of a rendered tree.

    Subclasses may set ``tag`` and ``strategy`` as class attributes;
    data-driven leaf types pass them through ``NodeFactory`` instead.
    """

    tag: Optional[str] = None
    strategy: ElementCreationStrategy = PLAIN

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        *,
        tag: Optional[str] = None,
        strategy: Optional[ElementCreationStrategy] = None,
        type_name: Optional[str] = None,
        auto_id: bool = True,
    ):
        config = config or {}
        if tag is not None:
            self.tag = tag
        if strategy is not None:
            self.strategy = strategy
        self.type_name = type_name or type(self).__name__

        id = config.get("id")
        if not id and auto_id:
            id = generate_id(self.type_name)
        self._id: Optional[str] = id or None
        self._scope: str = config.get("scope") or DEFAULT_SCOPE

        self.host: Optional[Element] = None
        self.children: list[Child] = list(config.get("children") or [])
        self.content: Optional[str] = config.get("content")

        self.attributes = _copy(config.get("attributes"))  # set through set_attribute
        self.properties = _copy(config.get("properties"))  # assigned onto the element
        self.class_name: Optional[str] = _class_text(_option(config, "class_name", "classNames"))
        self.style = _copy(config.get("style"))
        self.listeners = _copy(config.get("listeners"))
        self.data = _copy(_option(config, "data", "customData"))

        self.element: Optional[Element] = None
        self._manager_ref: Optional[weakref.ReferenceType] = None
        # Manager that created this node; resolves children of nodes without an id
        self._creator_ref: Optional[weakref.ReferenceType] = None
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"<{self.type_name} {self._scope}:{self._id}>"

    # -- identity ----------------------------------------------------------

    @property
    def id(self) -> Optional[str]:
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        logger.warning("Node: It is not allowed to assign new value to id.")

    @property
    def scope(self) -> str:
        return self._scope

    @scope.setter
    def scope(self, value: str) -> None:
        logger.warning("Node: It is not allowed to assign new value to scope.")

    @property
    def manager(self) -> Optional[Manager]:
        """Manager whose identity registry holds this node, if any."""
        if self._manager_ref is None:
            return None
        return self._manager_ref()

    @manager.setter
    def manager(self, manager: Optional[Manager]) -> None:
        self._manager_ref = weakref.ref(manager) if manager is not None else None

    @property
    def creator(self) -> Optional[Manager]:
        """Manager that last created or tracked this node, registered or not."""
        if self._creator_ref is None:
            return None
        return self._creator_ref()

    @creator.setter
    def creator(self, manager: Optional[Manager]) -> None:
        self._creator_ref = weakref.ref(manager) if manager is not None else None

    def _resolver(self) -> Optional[Manager]:
        return self.manager or self.creator

    @property
    def attached(self) -> bool:
        return self.element is not None

    # -- children ----------------------------------------------------------

    def add(self, child: Child) -> None:
        with self._lock:
            self.children.append(child)

    def insert(self, index: int, child: Child) -> None:
        with self._lock:
            self.children.insert(index, child)

    def remove(self, child: Child) -> None:
        """
        Drop ``child`` from this node's children.

        The child loses its manager reference but stays in the identity
        registry and keeps its element; only clear() and destroy() tear down.
        """
        with self._lock:
            for index, existing in enumerate(self.children):
                if existing is child:
                    if isinstance(child, Node):
                        child.manager = None
                    del self.children[index]
                    return

    # -- rendering ---------------------------------------------------------

    def _strict(self) -> bool:
        manager = self._resolver()
        return manager is not None and manager.config.strict

    def _guard_rerender(self) -> bool:
        manager = self._resolver()
        return manager is None or manager.config.guard_rerender

    def render(self) -> None:
        """Create the backing element under ``host``, apply payloads, render children."""
        if self.element is not None and self._guard_rerender():
            logger.warning("Node: %r is already rendered, clear it before rendering again.", self)
            return
        if self.host is None:
            report(logger, RenderError, "Node: %r has no host to render into.", self, strict=self._strict())
            return
        if not self.tag:
            report(logger, RenderError, "Node: %r has no element tag.", self, strict=self._strict())
            return

        document = self.host.owner_document or Document()
        element = self.strategy.create_element(document, self.tag)
        self.element = element
        self.host.append_child(element)
        self._apply_payloads(element)

        with self._lock:
            for index, child in enumerate(self.children):
                node = self._resolve_child(child)
                if node is None:
                    continue
                self.children[index] = node
                node.host = element
                node.render()

    def _apply_payloads(self, element: Element) -> None:
        strategy = self.strategy
        if self.attributes:
            strategy.apply_attributes(element, self.attributes)
        if self.properties:
            strategy.apply_properties(element, self.properties)
        if self.class_name:
            strategy.apply_class_name(element, self.class_name)
        if self.style:
            strategy.apply_style(element, self.style)
        if self.listeners:
            strategy.apply_listeners(element, self.listeners)
        if self.data:
            strategy.apply_data(element, self.data)
        if self.content:
            strategy.apply_content(element, self.content)

    def _resolve_child(self, child: Child) -> Optional[Node]:
        manager = self._resolver()
        if manager is not None:
            return manager.create(child)
        if isinstance(child, Node):
            return child
        logger.warning("Node: %r has no manager to create child %r.", self, child)
        return None

    # -- teardown ----------------------------------------------------------

    def clear(self) -> None:
        """
        Tear down the rendered subtree so render() can be called again.

        Every descendant node is unregistered, has its listener slots
        nulled and loses its element, parent before children. This node's
        own registry entry is kept.
        """
        manager = self._resolver()

        def walk(items: list[Child]) -> None:
            for item in items:
                if not isinstance(item, Node):
                    # never rendered, so never registered
                    continue
                if item.id is not None:
                    registry = manager or item.manager
                    if registry is not None:
                        registry.remove(item.id, item.scope)
                if item.element is not None:
                    item.strategy.detach_listeners(item.element, item.listeners)
                    item.element = None
                walk(item.children)

        with self._lock:
            walk(self.children)
            self.children.clear()

        if self.element is not None:
            if self.element.parent is not None:
                self.element.parent.remove_child(self.element)
            self.strategy.detach_listeners(self.element, self.listeners)
            self.element = None

    def destroy(self) -> None:
        """Clear, drop the host and leave the identity registry. Terminal."""
        self.clear()
        self.host = None
        manager = self.manager
        if self._id is not None and manager is not None:
            manager.remove(self._id, self._scope)
        self.manager = None


class NodeFactory:
    """
    Data-driven leaf type: builds a Node for one structural tag.

    Usage:
        rect = NodeFactory('rect', NAMESPACED)
        node = rect({'id': 'r1', 'attributes': {'width': 10}})
    """

    def __init__(
        self,
        tag: str,
        strategy: ElementCreationStrategy = PLAIN,
        type_name: Optional[str] = None,
        auto_id: bool = True,
        node_class: Optional[type[Node]] = None,
    ):
        self.tag = tag
        self.strategy = strategy
        # animateMotion -> AnimateMotion
        self.type_name = type_name or tag[:1].upper() + tag[1:]
        self.auto_id = auto_id
        self.node_class = node_class or Node

    def __call__(self, config: Mapping[str, Any]) -> Node:
        return self.node_class(
            config,
            tag=self.tag,
            strategy=self.strategy,
            type_name=self.type_name,
            auto_id=self.auto_id,
        )

    def __repr__(self) -> str:
        return f"<NodeFactory {self.tag} {self.strategy!r}>"
