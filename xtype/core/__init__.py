"""Rendering engine core: nodes, strategies, registries and the manager."""

from .errors import (
    DuplicateObjectError,
    DuplicateTypeError,
    InvalidConfigError,
    RenderError,
    UnknownObjectError,
    UnknownTypeError,
    XTypeError,
)
from .manager import Manager, create_svg_manager
from .node import Node, NodeFactory
from .registry import DEFAULT_SCOPE, IdentityRegistry, TypeRegistry
from .strategies import NAMESPACED, PLAIN, ElementCreationStrategy, NamespacedStrategy, PlainStrategy

__all__ = [
    "DEFAULT_SCOPE",
    "DuplicateObjectError",
    "DuplicateTypeError",
    "ElementCreationStrategy",
    "IdentityRegistry",
    "InvalidConfigError",
    "Manager",
    "NAMESPACED",
    "NamespacedStrategy",
    "Node",
    "NodeFactory",
    "PLAIN",
    "PlainStrategy",
    "RenderError",
    "TypeRegistry",
    "UnknownObjectError",
    "UnknownTypeError",
    "XTypeError",
    "create_svg_manager",
]
