"""Shared test fixtures."""

import pytest

from xtype.core.manager import Manager
from xtype.core.node import NodeFactory
from xtype.core.strategies import NAMESPACED, PLAIN
from xtype.dom import Document


@pytest.fixture
def document():
    return Document()


@pytest.fixture
def host(document):
    """Detached host element to render into."""
    return document.create_element("div")


@pytest.fixture
def manager():
    """Manager with a small mixed tag table."""
    manager = Manager()
    manager.add_type("group", NodeFactory("g", NAMESPACED, type_name="Group"))
    manager.add_type("rect", NodeFactory("rect", NAMESPACED))
    manager.add_type("use", NodeFactory("use", NAMESPACED))
    manager.add_type("div", NodeFactory("div", PLAIN))
    manager.add_type("span", NodeFactory("span", PLAIN))
    return manager


@pytest.fixture
def sample_tree():
    """Nested config: group with three rect children, one nested group."""
    return {
        "xtype": "group",
        "id": "g1",
        "children": [
            {"xtype": "rect", "id": "a", "attributes": {"width": "10"}},
            {"xtype": "rect", "id": "b"},
            {
                "xtype": "group",
                "id": "inner",
                "children": [
                    {"xtype": "rect", "id": "deep", "listeners": {"click": lambda e: e}},
                ],
            },
        ],
    }
