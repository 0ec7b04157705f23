"""
Tag library - discovers and loads YAML tag tables.

A tag table maps type tags to structural element names for one creation
strategy. Each table becomes a set of NodeFactory objects that a Manager
registers as its leaf types.

File format:
    strategy: namespaced          # or "plain"
    namespace: http://...         # optional, namespaced tables only
    tags:
      rect: rect                  # type tag -> element name
      svg: {element: svg, type_name: SvgDom}
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml

from ..core.node import NodeFactory
from ..core.strategies import STRATEGIES, ElementCreationStrategy, NamespacedStrategy

logger = logging.getLogger(__name__)


@dataclass
class TagTable:
    """One loaded tag table."""
    name: str
    strategy: ElementCreationStrategy
    # type tag -> (element name, type name or None)
    tags: dict[str, tuple[str, Optional[str]]] = field(default_factory=dict)

    def factories(self) -> dict[str, NodeFactory]:
        return {
            tag: NodeFactory(element, self.strategy, type_name=type_name)
            for tag, (element, type_name) in self.tags.items()
        }

    @classmethod
    def from_dict(cls, name: str, data: dict) -> "TagTable":
        if not isinstance(data, dict):
            raise ValueError(f"tag table {name!r} must be a mapping")
        strategy_name = data.get("strategy", "plain")
        if strategy_name not in STRATEGIES:
            raise ValueError(f"unknown strategy {strategy_name!r} in tag table {name!r}")
        strategy = STRATEGIES[strategy_name]
        if strategy_name == "namespaced" and "namespace" in data:
            strategy = NamespacedStrategy(namespace=data["namespace"])

        tags: dict[str, tuple[str, Optional[str]]] = {}
        for tag, entry in (data.get("tags") or {}).items():
            if isinstance(entry, dict):
                tags[str(tag)] = (entry.get("element", str(tag)), entry.get("type_name"))
            else:
                tags[str(tag)] = (str(entry), None)
        return cls(name=name, strategy=strategy, tags=tags)


class TagLibrary:
    """
    Registry of tag tables loaded from YAML files.

    Usage:
        library = TagLibrary()
        library.load_all()
        library.install(manager, 'svg')
    """

    def __init__(self, paths: Optional[list[str]] = None):
        """
        Args:
            paths: Directories to search for ``*.yaml`` tables.
                   Defaults to this package's directory.
        """
        if paths is None:
            paths = [str(Path(__file__).parent)]

        self.paths = [Path(p) for p in paths]
        self._tables: dict[str, TagTable] = {}
        self._lock = threading.RLock()

    def load_all(self) -> None:
        """Discover and load every YAML file in the search paths."""
        with self._lock:
            self._tables.clear()
            for base_path in self.paths:
                if not base_path.exists():
                    continue
                for yaml_file in sorted(base_path.glob("*.yaml")) + sorted(base_path.glob("*.yml")):
                    self.load_file(yaml_file)

    def load_file(self, file_path: Path) -> Optional[TagTable]:
        """Load a single tag table, keyed by file stem."""
        file_path = Path(file_path)
        try:
            with open(file_path, "r") as f:
                data = yaml.safe_load(f)
            if not data:
                return None
            table = TagTable.from_dict(file_path.stem, data)
        except (yaml.YAMLError, OSError, ValueError) as e:
            # Log but don't crash on bad files
            logger.warning("Failed to load tag table %s: %s", file_path, e)
            return None

        with self._lock:
            self._tables[table.name] = table
        return table

    def get(self, name: str) -> Optional[TagTable]:
        with self._lock:
            return self._tables.get(name)

    def list_names(self) -> list[str]:
        with self._lock:
            return list(self._tables)

    def install(self, manager, name: str) -> int:
        """Register every tag of table ``name`` on ``manager``. Returns the count."""
        table = self.get(name)
        if table is None:
            logger.warning("Tag table %s is not defined.", name)
            return 0
        factories = table.factories()
        for tag, factory in factories.items():
            manager.add_type(tag, factory)
        return len(factories)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None


@lru_cache(maxsize=1)
def builtin_library() -> TagLibrary:
    """The tag tables shipped with the package (svg, html)."""
    library = TagLibrary()
    library.load_all()
    return library
