"""
xtype - render declarative node trees into live element trees.

Configs (plain mappings keyed by ``xtype``) are turned into Node objects by
a Manager, rendered into a host element tree and tracked by (scope, id)
until they are destroyed.
"""

from .config import EngineConfig, load_config
from .core import (
    NAMESPACED,
    PLAIN,
    Manager,
    NamespacedStrategy,
    Node,
    NodeFactory,
    PlainStrategy,
    XTypeError,
    create_svg_manager,
)
from .dom import Document, Element, to_markup

__all__ = [
    "Document",
    "Element",
    "EngineConfig",
    "Manager",
    "NAMESPACED",
    "NamespacedStrategy",
    "Node",
    "NodeFactory",
    "PLAIN",
    "PlainStrategy",
    "XTypeError",
    "create_svg_manager",
    "load_config",
    "to_markup",
]
