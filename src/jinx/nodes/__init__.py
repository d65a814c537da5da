"""Node variants and the factory that selects between them.

Variants:
    ElementNode    string tag ("div", "br", ...)
    ComponentNode  callable tag
    FragmentNode   empty-string tag

"""

from collections.abc import Callable
from typing import Any

from jinx.exceptions import InvalidNodeError
from jinx.nodes.base import Node, NodeKind, render_child, render_children, settle
from jinx.nodes.element import ElementNode, style_to_css
from jinx.nodes.structure import ComponentNode, Fragment, FragmentNode
from jinx.utils.constants import FRAGMENT_TAG


def jsx(tag: str | Callable[..., Any], props: dict[str, Any] | None = None, *children: Any) -> Node:
    """Build a node.

    Construction is free of escaping and I/O; all encoding happens when the
    node is rendered.

    Args:
        tag: Element name, ``""`` for a fragment, or a component function
        props: Attributes (elements) or keyword arguments (components)
        *children: Child values in document order

    Example:
        >>> jsx("ul", None, jsx("li", None, "one"), [jsx("li", None, "two")]).render()
        '<ul><li>one</li><li>two</li></ul>'
    """
    if callable(tag):
        return ComponentNode(tag, props, children)
    if tag == FRAGMENT_TAG:
        return FragmentNode(tag, props, children)
    return ElementNode(tag, props, children)


def jsx_node(value: Any) -> Node:
    """Return ``value`` typed as a Node, for use with ``Node.on()``.

    Raises:
        InvalidNodeError: If ``value`` is not a Node
    """
    if not isinstance(value, Node):
        raise InvalidNodeError(value)
    return value


__all__ = [
    "ComponentNode",
    "ElementNode",
    "Fragment",
    "FragmentNode",
    "Node",
    "NodeKind",
    "jsx",
    "jsx_node",
    "render_child",
    "render_children",
    "settle",
    "style_to_css",
]
