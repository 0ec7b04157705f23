"""
Data-driven leaf types.

Tag tables are YAML files mapping type tags to structural element names.
"""

from .registry import TagLibrary, TagTable, builtin_library

__all__ = ["TagLibrary", "TagTable", "builtin_library"]
