"""Scoped values for components (``create_context`` / ``use_context``).

A Context keeps its value stack in a ContextVar holding an immutable tuple,
so every asyncio task works on its own copy: concurrent renders never see
each other's Provider values, and a task spawned inside a Provider's scope
inherits the value in force when it was created.

Provider rendering is a small state machine::

    IDLE ──push──> ACTIVE_SYNC ──pop──> IDLE               (children complete)
                             └──pop──> ACTIVE_PENDING      (children pending)
    ACTIVE_PENDING ──re-push──> RESTORING ──await, pop──> IDLE

The first pop ends the synchronous critical section so later siblings see
the outer value. The continuation re-pushes before awaiting the children so
that component bodies running during the await still read the Provider's
value.

Example:
    >>> theme = create_context("light")
    >>> def Label(children=None):
    ...     return f"theme={use_context(theme)}"
    >>> jsx(theme.Provider, {"value": "dark"}, jsx(Label, None)).render()
    'theme=dark'

"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from enum import Enum
from typing import Any, Generic, TypeVar

from jinx.buffer import RenderBuffer
from jinx.hooks import EmitterChain
from jinx.nodes.base import render_children
from jinx.nodes.structure import FragmentNode
from jinx.utils.constants import FRAGMENT_TAG

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProviderState(Enum):
    """Phase of a Provider render."""

    IDLE = "idle"
    ACTIVE_SYNC = "active-sync"
    ACTIVE_PENDING = "active-pending"
    RESTORING = "restoring"


class Context(Generic[T]):
    """A named stack of values, seeded with a default and never empty.

    Attributes:
        name: Label used in ContextVar names and debug logs
        default: Bottom-of-stack value
        Provider: Function component pushing ``value`` around its children
    """

    __slots__ = ("Provider", "_stack", "default", "name")

    def __init__(self, default: T, name: str | None = None):
        self.default = default
        self.name = name or "context"
        self._stack: ContextVar[tuple[T, ...]] = ContextVar(
            f"jinx.context.{self.name}", default=(default,)
        )
        self.Provider = self._make_provider()

    @property
    def values(self) -> tuple[T, ...]:
        """The value stack visible to the current task, bottom first."""
        return self._stack.get()

    def get(self) -> T:
        """Current (innermost) value."""
        return self._stack.get()[-1]

    def push(self, value: T) -> Token[tuple[T, ...]]:
        """Push ``value``; pass the returned token to ``pop()``."""
        return self._stack.set((*self._stack.get(), value))

    def pop(self, token: Token[tuple[T, ...]]) -> None:
        """Undo the ``push()`` that returned ``token``."""
        self._stack.reset(token)

    @contextmanager
    def scope(self, value: T) -> Iterator[T]:
        """Make ``value`` current for the duration of the with block.

        Example:
            >>> with theme.scope("dark"):
            ...     html = page.render()
        """
        token = self.push(value)
        try:
            yield value
        finally:
            self.pop(token)

    def _make_provider(self) -> Any:
        context = self

        def Provider(value: T, children: Any = None) -> ProviderNode[T]:
            return ProviderNode(context, value, children)

        Provider.__qualname__ = f"{self.name}.Provider"
        return Provider

    def __repr__(self) -> str:
        return f"<Context {self.name!r} default={self.default!r}>"


class ProviderNode(FragmentNode, Generic[T]):
    """Fragment that renders its children with a context value pushed.

    ``state`` records the most recent phase transition, for debugging. It
    lives on the node, so when one node is rendered by several tasks at once
    it shows the last transition made by any of them. Context values are
    unaffected: each render pushes onto its own task-local stack.
    """

    __slots__ = ("context", "state", "value")

    def __init__(self, context: Context[T], value: T, children: Any):
        super().__init__(FRAGMENT_TAG, {"value": value}, [] if children is None else [children])
        self.context = context
        self.value = value
        self.state = ProviderState.IDLE

    def _transition(self, state: ProviderState) -> None:
        logger.debug(f"Provider[{self.context.name}] {self.state.value} -> {state.value}")
        self.state = state

    def _serialize(self, buffer: RenderBuffer, emitters: EmitterChain) -> None:
        inner = buffer.child()
        self._transition(ProviderState.ACTIVE_SYNC)
        token = self.context.push(self.value)
        try:
            render_children(self.children, inner, emitters)
        finally:
            self.context.pop(token)

        if not inner.is_pending:
            self._transition(ProviderState.IDLE)
            buffer.write(inner.getvalue())
            return

        self._transition(ProviderState.ACTIVE_PENDING)
        buffer.defer(self._resume(inner), source=inner)

    async def _resume(self, inner: RenderBuffer) -> str:
        self._transition(ProviderState.RESTORING)
        token = self.context.push(self.value)
        try:
            return await inner.resolve()
        finally:
            self.context.pop(token)
            self._transition(ProviderState.IDLE)


def create_context(default: T, name: str | None = None) -> Context[T]:
    """Create a Context whose stack starts with ``default``."""
    return Context(default, name)


def use_context(context: Context[T]) -> T:
    """Read the innermost value of ``context`` visible to the caller."""
    return context.get()
