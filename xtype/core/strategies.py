"""
Element creation strategies.

A strategy turns a structural tag name into a host element and applies a
node's declarative payloads to it. The plain and namespaced variants only
differ in how elements are created and how attributes are set; all other
payloads are applied the same way.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from ..dom import SVG_NS, XLINK_NS, Document, Element


class ElementCreationStrategy:
    """Shared payload application. Subclasses implement element creation."""

    name = "base"

    def create_element(self, document: Document, tag: str) -> Element:
        raise NotImplementedError

    def set_attribute(self, element: Element, name: str, value: Any) -> None:
        element.set_attribute(name, value)

    def apply_attributes(self, element: Element, attributes: Mapping[str, Any]) -> None:
        for name, value in attributes.items():
            self.set_attribute(element, name, value)

    def apply_properties(self, element: Element, properties: Mapping[str, Any]) -> None:
        """Shallow-copy key/value pairs directly onto the element."""
        for name, value in properties.items():
            setattr(element, name, value)

    def apply_class_name(self, element: Element, class_name: str) -> None:
        element.class_name = class_name

    def apply_style(self, element: Element, style: Mapping[str, Any]) -> None:
        element.style.update(style)

    def apply_listeners(self, element: Element, listeners: Mapping[str, Callable]) -> None:
        for event, handler in listeners.items():
            setattr(element, "on" + event, handler)

    def detach_listeners(self, element: Element, listeners: Optional[Mapping[str, Callable]]) -> None:
        """Null every handler slot previously assigned from ``listeners``."""
        if not listeners:
            return
        for event in listeners:
            setattr(element, "on" + event, None)

    def apply_data(self, element: Element, data: Mapping[str, Any]) -> None:
        element.data = dict(data)

    def apply_content(self, element: Element, content: str) -> None:
        element.inner_html = content

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class PlainStrategy(ElementCreationStrategy):
    """Elements in the default (HTML) namespace."""

    name = "plain"

    def create_element(self, document: Document, tag: str) -> Element:
        return document.create_element(tag)


class NamespacedStrategy(ElementCreationStrategy):
    """
    Elements in a fixed secondary namespace (SVG by default).

    Attributes whose name starts with ``reserved_prefix`` are set in
    ``attribute_namespace`` (``xlink:href`` goes to the XLink namespace).
    """

    name = "namespaced"

    def __init__(self, namespace: str = SVG_NS, attribute_namespace: str = XLINK_NS, reserved_prefix: str = "xlink"):
        self.namespace = namespace
        self.attribute_namespace = attribute_namespace
        self.reserved_prefix = reserved_prefix

    def create_element(self, document: Document, tag: str) -> Element:
        return document.create_element_ns(self.namespace, tag)

    def set_attribute(self, element: Element, name: str, value: Any) -> None:
        if name.startswith(self.reserved_prefix):
            element.set_attribute_ns(self.attribute_namespace, name, value)
        else:
            element.set_attribute(name, value)

    def __repr__(self) -> str:
        return f"<NamespacedStrategy {self.namespace}>"


PLAIN = PlainStrategy()
NAMESPACED = NamespacedStrategy()

STRATEGIES = {
    PLAIN.name: PLAIN,
    NAMESPACED.name: NAMESPACED,
}
