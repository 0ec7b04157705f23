"""
In-memory host environment for the rendering engine.

A small subset of the browser DOM: documents create elements (optionally in
a namespace), elements hold attributes, a style mapping, custom data, raw
inner markup and ``on<event>`` handler slots, and can be serialized back to
markup with ``to_markup``.
"""

from __future__ import annotations

from typing import Any, Callable, Optional
from xml.sax.saxutils import quoteattr

HTML_NS = "http://www.w3.org/1999/xhtml"
SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# Prefixes used when serializing namespaced attributes
NS_PREFIXES = {
    XLINK_NS: "xlink",
    "http://www.w3.org/XML/1998/namespace": "xml",
}


class Document:
    """Element factory and owner of a ``body`` element."""

    def __init__(self):
        self.body = self.create_element("body")

    def create_element(self, tag: str) -> Element:
        return Element(tag, HTML_NS, owner_document=self)

    def create_element_ns(self, namespace: Optional[str], tag: str) -> Element:
        return Element(tag, namespace, owner_document=self)


class Element:
    """A single node of the host element tree."""

    def __init__(self, tag: str, namespace: Optional[str] = HTML_NS, owner_document: Optional[Document] = None):
        self.tag = tag
        self.namespace = namespace
        self.owner_document = owner_document
        self.parent: Optional[Element] = None
        self.children: list[Element] = []
        self.attributes: dict[str, str] = {}
        # (namespace, qualified name) -> value
        self.namespaced_attributes: dict[tuple[str, str], str] = {}
        self.class_name = ""
        self.style: dict[str, Any] = {}
        self.data: Optional[dict] = None
        self.inner_html: Optional[str] = None

    def __getattr__(self, name: str) -> Any:
        # Unassigned event handler slots read as None, like DOM ``onclick``
        if name.startswith("on"):
            return None
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __repr__(self) -> str:
        return f"<Element {self.tag} children={len(self.children)}>"

    # -- tree --------------------------------------------------------------

    def append_child(self, child: Element) -> Element:
        """Append ``child``, moving it out of its current parent first."""
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: Element) -> Element:
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                child.parent = None
                return child
        raise ValueError(f"{child!r} is not a child of {self!r}")

    # -- attributes --------------------------------------------------------

    def set_attribute(self, name: str, value: Any) -> None:
        self.attributes[name] = str(value)

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def set_attribute_ns(self, namespace: str, name: str, value: Any) -> None:
        self.namespaced_attributes[(namespace, name)] = str(value)

    def get_attribute_ns(self, namespace: str, local_name: str) -> Optional[str]:
        """Look up a namespaced attribute by its local name (``href`` for ``xlink:href``)."""
        for (ns, name), value in self.namespaced_attributes.items():
            if ns == namespace and name.rpartition(":")[2] == local_name:
                return value
        return None

    # -- events ------------------------------------------------------------

    def dispatch(self, event: str, payload: Any = None) -> Any:
        """Invoke the ``on<event>`` slot if one is assigned."""
        handler: Optional[Callable] = getattr(self, "on" + event)
        if handler is None:
            return None
        return handler(payload)


def _style_text(style: dict) -> str:
    return "; ".join(f"{key}: {value}" for key, value in style.items())


def to_markup(element: Element, parent_namespace: Optional[str] = None) -> str:
    """Serialize ``element`` and its subtree to markup text."""
    attrs: list[tuple[str, str]] = []
    if element.namespace and element.namespace != parent_namespace:
        attrs.append(("xmlns", element.namespace))

    declared = set()
    for (ns, name), _ in element.namespaced_attributes.items():
        prefix = name.partition(":")[0] if ":" in name else NS_PREFIXES.get(ns)
        if prefix and prefix not in declared and prefix != "xml":
            attrs.append((f"xmlns:{prefix}", ns))
            declared.add(prefix)

    attrs.extend(element.attributes.items())
    for (ns, name), value in element.namespaced_attributes.items():
        if ":" not in name and ns in NS_PREFIXES:
            name = f"{NS_PREFIXES[ns]}:{name}"
        attrs.append((name, value))
    if element.class_name and "class" not in element.attributes:
        attrs.append(("class", element.class_name))
    if element.style and "style" not in element.attributes:
        attrs.append(("style", _style_text(element.style)))

    opening = element.tag + "".join(f" {name}={quoteattr(str(value))}" for name, value in attrs)

    inner = element.inner_html or ""
    inner += "".join(to_markup(child, element.namespace) for child in element.children)

    if not inner:
        return f"<{opening}/>"
    return f"<{opening}>{inner}</{element.tag}>"

