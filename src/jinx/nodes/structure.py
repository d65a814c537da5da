"""Component and fragment nodes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar

from jinx.buffer import RenderBuffer
from jinx.hooks import EmitterChain
from jinx.nodes.base import Node, NodeKind, render_child, render_children
from jinx.utils.constants import FRAGMENT_TAG


class ComponentNode(Node):
    """A function component call.

    Rendering calls ``tag(**props, children=...)``, where ``children`` is
    None for no children, the child itself for exactly one, else the list.
    The return value is rendered with the ordinary child rules: awaitables
    become pending segments, nodes render in place, numbers and markup are
    emitted verbatim, text is escaped.
    """

    __slots__ = ()

    kind: ClassVar[NodeKind] = NodeKind.COMPONENT

    @property
    def name(self) -> str:
        return getattr(self._tag, "__name__", "")

    def _serialize(self, buffer: RenderBuffer, emitters: EmitterChain) -> None:
        children = self.children
        component: Callable[..., Any] = self._tag
        result = component(
            **{
                **self.props,
                "children": children[0] if len(children) == 1 else (children or None),
            }
        )
        render_child(result, buffer, emitters)


class FragmentNode(Node):
    """Children only, no wrapping markup."""

    __slots__ = ()

    kind: ClassVar[NodeKind] = NodeKind.FRAGMENT

    def _serialize(self, buffer: RenderBuffer, emitters: EmitterChain) -> None:
        render_children(self.children, buffer, emitters)


def Fragment(children: Any = None, key: str | None = None) -> FragmentNode:
    """Group children without a wrapping element.

    Example:
        >>> jsx(Fragment, None, jsx("li", None, "a"), jsx("li", None, "b")).render()
        '<li>a</li><li>b</li>'
    """
    return FragmentNode(FRAGMENT_TAG, {}, [] if children is None else [children])
