"""
Manager - composition root owning the type-tag table and identity registry.

External code only talks to a Manager: it registers type tags, turns
configs into tracked nodes, renders them into a host element and destroys
them by identity.

Usage:
    manager = create_svg_manager()
    root = manager.render({'xtype': 'svg', 'id': 'canvas'}, document.body)
    manager.get('canvas').destroy()
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from ..config import EngineConfig
from ..dom import Element
from ..elements.registry import TagLibrary, builtin_library
from .errors import InvalidConfigError, UnknownObjectError, report
from .node import Node
from .registry import DEFAULT_SCOPE, Factory, IdentityRegistry, TypeRegistry

logger = logging.getLogger(__name__)


class Manager:
    """Owns one TypeRegistry and one IdentityRegistry."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.xtypes = TypeRegistry(strict=self.config.strict)
        self.objects = IdentityRegistry(self, strict=self.config.strict)

        for table in self.config.tag_tables:
            self.load_tags(table)

    def __repr__(self) -> str:
        return f"<Manager xtypes={len(self.xtypes)} objects={len(self.objects)}>"

    # -- type tags ---------------------------------------------------------

    def add_type(self, name: str, factory: Factory) -> None:
        """Register a factory (a Node subclass or any callable taking a config)."""
        self.xtypes.add(name, factory)

    def remove_type(self, name: str) -> None:
        self.xtypes.remove(name)

    def get_type(self, name: str) -> Optional[Factory]:
        return self.xtypes.get(name)

    def load_tags(self, table: Union[str, Path]) -> int:
        """
        Install a tag table.

        Args:
            table: Builtin table name ('svg', 'html') or path to a YAML table

        Returns:
            Number of type tags installed
        """
        path = Path(table)
        if path.suffix in (".yaml", ".yml") and path.exists():
            library = TagLibrary(paths=[str(path.parent)])
            loaded = library.load_file(path)
            if loaded is None:
                return 0
            return library.install(self, loaded.name)
        return builtin_library().install(self, str(table))

    # -- identities --------------------------------------------------------

    def add(self, id: str, node: Node, scope: str = DEFAULT_SCOPE) -> None:
        self.objects.add(id, node, scope)

    def remove(self, id: str, scope: str = DEFAULT_SCOPE) -> None:
        self.objects.remove(id, scope)

    def get(self, id: str, scope: str = DEFAULT_SCOPE) -> Optional[Node]:
        return self.objects.get(id, scope)

    # -- public operations -------------------------------------------------

    def create(self, config: Union[Node, Mapping[str, Any], None]) -> Optional[Node]:
        """
        Turn a config into a registered node without rendering it.

        A Node is registered under its own id and scope and returned as is.
        Returns None (after a warning) when the config is unusable.
        """
        if isinstance(config, Node):
            self._track(config)
            return config

        if not isinstance(config, Mapping) or not config:
            report(logger, InvalidConfigError, "Manager: config is undefined.", strict=self.config.strict)
            return None

        xtype = config.get("xtype", config.get("typeTag"))
        if xtype is None:
            report(logger, InvalidConfigError, "Manager: config.xtype is undefined.", strict=self.config.strict)
            return None

        factory = self.xtypes.get(xtype)
        if factory is None:
            return None

        node = factory(config)
        self._track(node)
        return node

    def _track(self, node: Node) -> None:
        node.creator = self
        if node.id is None:
            logger.debug("Manager: %r has no id and is not tracked.", node)
            return
        self.objects.add(node.id, node, node.scope)

    def render(self, config: Union[Node, Mapping[str, Any]], host: Element) -> Optional[Node]:
        """Create a node, attach it under ``host`` and render its subtree."""
        node = self.create(config)
        if node is None:
            return None
        node.host = host
        node.render()
        return node

    def destroy(self, id: str, scope: str = DEFAULT_SCOPE) -> None:
        """Destroy the node registered under (scope, id)."""
        node = self.get(id, scope)
        if node is None:
            report(logger, UnknownObjectError, "Manager: object named %s is not defined.", id,
                   strict=self.config.strict)
            return
        node.destroy()


def create_svg_manager(config: Optional[EngineConfig] = None) -> Manager:
    """A Manager with the builtin SVG tag table installed."""
    manager = Manager(config)
    if "svg" not in manager.config.tag_tables:
        manager.load_tags("svg")
    return manager
