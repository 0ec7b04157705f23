"""Property-based tests using Hypothesis."""

from hypothesis import given, settings, strategies as st

from xtype.core.manager import Manager
from xtype.core.node import Node, NodeFactory
from xtype.core.strategies import NAMESPACED
from xtype.dom import XLINK_NS, Document

identifiers = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789-_", min_size=1, max_size=12)


def make_manager() -> Manager:
    manager = Manager()
    manager.add_type("group", NodeFactory("g", NAMESPACED, type_name="Group"))
    manager.add_type("rect", NodeFactory("rect", NAMESPACED))
    return manager


# Nested group/rect configs without ids
trees = st.recursive(
    st.just({"xtype": "rect"}),
    lambda children: st.lists(children, max_size=4).map(lambda kids: {"xtype": "group", "children": kids}),
    max_leaves=20,
)


class TestIdentityProperties:
    """Property tests for immutable identity fields."""

    @given(initial=identifiers, scope=identifiers, new_id=identifiers, new_scope=identifiers)
    def test_identity_writes_have_no_effect(self, initial, scope, new_id, new_scope):
        """Writes to id and scope should never change them."""
        node = Node({"id": initial, "scope": scope})
        node.id = new_id
        node.scope = new_scope
        assert node.id == initial
        assert node.scope == scope

    @given(id=identifiers, scope=identifiers)
    def test_last_registration_wins(self, id, scope):
        """The last node added under a key should be returned."""
        manager = make_manager()
        first = manager.create({"xtype": "rect", "id": id, "scope": scope})
        second = manager.create({"xtype": "rect", "id": id, "scope": scope})
        assert manager.get(id, scope) is second
        assert first.manager is manager


class TestRenderProperties:
    """Property tests for render and clear."""

    @given(ids=st.lists(identifiers, min_size=1, max_size=8, unique=True))
    def test_children_render_in_order(self, ids):
        """Child elements should follow config order."""
        manager = make_manager()
        host = Document().create_element("div")
        root = manager.render({"xtype": "group", "children": [{"xtype": "rect", "id": i} for i in ids]}, host)
        assert root.element.children == [manager.get(i).element for i in ids]

    @settings(max_examples=50)
    @given(tree=trees)
    def test_clear_leaves_only_root_registered(self, tree):
        """After clear only the root should stay registered."""
        manager = make_manager()
        host = Document().create_element("div")
        root = manager.render(tree, host)

        descendants = []

        def collect(node):
            for child in node.children:
                descendants.append(child)
                collect(child)

        collect(root)
        root.clear()

        assert manager.objects.keys() == [f"global:{root.id}"]
        assert all(node.element is None for node in descendants)
        assert root.children == []
        assert host.children == []

    @settings(max_examples=50)
    @given(tree=trees)
    def test_destroy_empties_registry(self, tree):
        """destroy should unregister the whole tree."""
        manager = make_manager()
        root = manager.render(tree, Document().create_element("div"))
        root.destroy()
        assert len(manager.objects) == 0
        assert root.host is None

    @given(
        plain=st.dictionaries(identifiers.filter(lambda s: not s.startswith("xlink")), identifiers, max_size=5),
        linked=st.dictionaries(identifiers.map(lambda s: "xlink:" + s), identifiers, max_size=5),
    )
    def test_namespaced_attribute_routing(self, plain, linked):
        """Only prefixed attributes should go to the XLink namespace."""
        node = Node({"attributes": {**plain, **linked}}, tag="use", strategy=NAMESPACED)
        node.host = Document().create_element("div")
        node.render()
        assert node.element.attributes == plain
        for name, value in linked.items():
            assert node.element.get_attribute_ns(XLINK_NS, name.split(":", 1)[1]) == value
