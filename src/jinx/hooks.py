"""Per-node render hooks.

Listeners are attached to a node with ``Node.on(event_name, listener)`` and
fire for that node and every node rendered beneath it.

Event names:
    render              before any node renders
    render.<name>       before a node whose tag/component name is <name>
    after_render        after any node renders
    after_render.<name> after a node whose tag/component name is <name>

Firing order per node: global pre-render, scoped pre-render, the node's own
serialization (unless canceled), global post-render, scoped post-render.

Listener exceptions are not caught here; they propagate out of ``render()``.

Example:
    >>> from jinx import jsx
    >>> def shout(event):
    ...     event.set_content("<b>HI</b>")
    >>> jsx("div", None, jsx("span", None, "hi")).on("render.span", shout).render()
    '<div><b>HI</b></div>'

"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from inspect import isawaitable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from jinx.buffer import RenderBuffer
    from jinx.nodes.base import Node

RENDER = "render"
AFTER_RENDER = "after_render"

Listener = Callable[["RenderEvent"], Any]
EmitterChain = tuple["EventEmitter", ...]


def _check_event_name(event_name: str) -> None:
    base, _, _ = event_name.partition(".")
    if base not in (RENDER, AFTER_RENDER):
        raise ValueError(
            f"Unknown event {event_name!r}; expected 'render', 'render.<name>', "
            f"'after_render' or 'after_render.<name>'"
        )


@dataclass(slots=True, eq=False)
class RenderEvent:
    """State shared by the listeners of one node during one render.

    Attributes:
        node: The node being rendered
        buffer: Live output buffer the node writes into
        canceled: True once the node's own serialization is suppressed
    """

    node: Node
    buffer: RenderBuffer
    canceled: bool = False
    _emitters: EmitterChain = field(default=(), repr=False)

    def set_content(self, content: str | Awaitable[Any]) -> None:
        """Replace the node's output with ``content``.

        Cancels the node's own serialization. Text is emitted as-is (no
        escaping); an awaitable becomes a pending segment at this position.
        """
        self.canceled = True
        if isawaitable(content):
            from jinx.nodes.base import settle

            self.buffer.defer(
                settle(content, self.buffer.config, self._emitters, raw=True), source=content
            )
        else:
            self.buffer.write(str(content))


class EventEmitter:
    """Ordered listener lists keyed by event name.

    Created lazily by ``Node.on()`` and owned by that node alone.
    """

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def on(self, event_name: str, listener: Listener) -> EventEmitter:
        _check_event_name(event_name)
        self._listeners.setdefault(event_name, []).append(listener)
        return self

    def emit(self, event_name: str, event: RenderEvent) -> None:
        for listener in self._listeners.get(event_name, ()):
            listener(event)

    def listener_count(self, event_name: str | None = None) -> int:
        """Number of listeners for ``event_name`` (all events if None)."""
        if event_name is None:
            return sum(len(listeners) for listeners in self._listeners.values())
        return len(self._listeners.get(event_name, ()))


def emit_chain(emitters: EmitterChain, base: str, name: str, event: RenderEvent) -> None:
    """Fire the global then the name-scoped event across a listener chain.

    Outer emitters fire before inner ones within each phase.
    """
    for event_name in (base, f"{base}.{name}"):
        for emitter in emitters:
            emitter.emit(event_name, event)
