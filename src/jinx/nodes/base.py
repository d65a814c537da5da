"""Base node class and the child serialization rules.

Every node is pre-escaped: nesting a node inside another never re-escapes
its output. Nodes hold no parent reference; rendering is strictly top-down.

Child rules (applied recursively, in order):

| Child                          | Output                      |
|--------------------------------|-----------------------------|
| Node                           | rendered in place           |
| None, bool                     | nothing                     |
| int, float, ``__html__`` value | verbatim                    |
| str                            | HTML-escaped                |
| awaitable                      | pending segment             |
| other iterable                 | each item, same rules       |

"""

from __future__ import annotations

from collections.abc import Awaitable, Coroutine, Iterable, Mapping
from enum import Enum
from inspect import isawaitable
from typing import TYPE_CHECKING, Any, ClassVar

from jinx.buffer import RenderBuffer
from jinx.exceptions import AsyncRenderError
from jinx.hooks import AFTER_RENDER, RENDER, EmitterChain, EventEmitter, RenderEvent, emit_chain
from jinx.utils.html import Markup

if TYPE_CHECKING:
    from jinx.config import RenderConfig
    from jinx.hooks import Listener


class NodeKind(Enum):
    """Variant of a node, fixed at construction."""

    ELEMENT = "element"
    COMPONENT = "component"
    FRAGMENT = "fragment"


class Node:
    """One renderable unit: an element, a component call or a fragment.

    Subclasses implement ``_serialize``; everything else (hooks, buffers,
    sync/async output) lives here.

    Attributes:
        props: Attribute/prop values by name
        children: Ordered children, flattened only while rendering
    """

    __slots__ = ("_emitter", "_tag", "children", "props")

    kind: ClassVar[NodeKind]

    def __init__(self, tag: Any, props: dict[str, Any] | None, children: Iterable[Any]):
        self._tag = tag
        self.props: dict[str, Any] = props if props is not None else {}
        self.children: list[Any] = list(children)
        self._emitter: EventEmitter | None = None

    @property
    def tag(self) -> Any:
        """Tag name or component function."""
        return self._tag

    @property
    def name(self) -> str:
        """Name used for scoped hook events."""
        return self._tag

    def on(self, event_name: str, listener: Listener) -> Node:
        """Register a render hook on this node. Chainable.

        Raises:
            ValueError: If ``event_name`` is not a known event
        """
        if self._emitter is None:
            self._emitter = EventEmitter()
        self._emitter.on(event_name, listener)
        return self

    def render(self, config: RenderConfig | None = None) -> str | Coroutine[Any, Any, str]:
        """Serialize this node to HTML.

        Returns:
            The HTML string if nothing in the tree is pending, otherwise a
            coroutine that resolves to the complete HTML string.

        Example:
            >>> jsx("div", {"class": "a", "hidden": False}, "hi", 42).render()
            '<div class="a">hi42</div>'
        """
        buffer = RenderBuffer(config)
        self.render_into(buffer, ())
        return buffer.finish()

    async def render_async(self, config: RenderConfig | None = None) -> str:
        """Serialize this node, awaiting any pending content."""
        result = self.render(config)
        if isinstance(result, str):
            return result
        return await result

    def render_into(self, buffer: RenderBuffer, emitters: EmitterChain) -> None:
        """Write this node into ``buffer``, firing hooks from ``emitters``."""
        if self._emitter is not None:
            emitters = (*emitters, self._emitter)
        if not emitters:
            self._serialize(buffer, emitters)
            return

        name = self.name
        event = RenderEvent(self, buffer, _emitters=emitters)
        emit_chain(emitters, RENDER, name, event)
        if not event.canceled:
            self._serialize(buffer, emitters)
        emit_chain(emitters, AFTER_RENDER, name, event)

    def _serialize(self, buffer: RenderBuffer, emitters: EmitterChain) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        buffer = RenderBuffer()
        self.render_into(buffer, ())
        if buffer.is_pending:
            buffer.close()
            raise AsyncRenderError(
                f"{self!r} contains pending content; use `await node.render_async()`"
            )
        return buffer.getvalue()

    def __html__(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} children={len(self.children)}>"


def render_children(children: Iterable[Any], buffer: RenderBuffer, emitters: EmitterChain) -> None:
    """Render a sequence of children in order."""
    for child in children:
        render_child(child, buffer, emitters)


def render_child(child: Any, buffer: RenderBuffer, emitters: EmitterChain) -> None:
    """Render one child value according to the child rules."""
    if isinstance(child, Node):
        child.render_into(buffer, emitters)
    elif child is None or isinstance(child, bool):
        return
    elif isinstance(child, (int, float)):
        buffer.write(str(child))
    elif hasattr(child, "__html__"):
        buffer.write(child.__html__())
    elif isinstance(child, str):
        buffer.write_escaped(child)
    elif isawaitable(child):
        buffer.defer(settle(child, buffer.config, emitters), source=child)
    elif isinstance(child, Iterable) and not isinstance(child, (Mapping, bytes)):
        render_children(child, buffer, emitters)
    else:
        buffer.write_escaped(child)


async def settle(
    value: Awaitable[Any],
    config: RenderConfig,
    emitters: EmitterChain,
    *,
    raw: bool = False,
) -> str:
    """Await ``value`` and render the result as a child would render.

    A string result is escaped exactly as it would have been had it been
    supplied synchronously, unless ``raw`` is set (hook override content).
    """
    result = await value
    if raw and isinstance(result, str):
        result = Markup(result)
    buffer = RenderBuffer(config)
    render_child(result, buffer, emitters)
    if buffer.is_pending:
        return await buffer.resolve()
    return buffer.getvalue()
