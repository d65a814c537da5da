"""Single-slot memoization for function components."""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Awaitable, Callable, Generator, Mapping
from inspect import isawaitable
from typing import Any

PropsEqual = Callable[[Mapping[str, Any], Mapping[str, Any]], bool]

_MISSING: Any = object()


def shallow_equal(a: Mapping[str, Any], b: Mapping[str, Any]) -> bool:
    """True if both mappings have the same keys with equal values.

    Values are compared one level deep: identity first, then ``==``.
    """
    if a is b:
        return True
    if len(a) != len(b):
        return False
    for key, value in a.items():
        other = b.get(key, _MISSING)
        if other is not value and other != value:
            return False
    return True


class SharedAwaitable:
    """Awaitable that runs ``awaitable`` once and replays its result.

    A coroutine can only be awaited once; memoized async output is awaited
    on every render that reuses it. Each waiter is shielded, so cancelling
    one render leaves the shared task running for the others.
    """

    __slots__ = ("_awaitable", "_future")

    def __init__(self, awaitable: Awaitable[Any]):
        self._awaitable = awaitable
        self._future: asyncio.Future[Any] | None = None

    @property
    def cancelled(self) -> bool:
        """True if the shared task was cancelled and can never produce output."""
        return self._future is not None and self._future.cancelled()

    def __await__(self) -> Generator[Any, None, Any]:
        if self._future is None:
            self._future = asyncio.ensure_future(self._awaitable)
        return asyncio.shield(self._future).__await__()


class MemoCache:
    """Cache cell holding the most recent props and output.

    Attributes:
        props_are_equal: Equality used to decide whether cached output is stale
        last_props: Props of the most recent call (``None`` before the first)
        last_output: Output for ``last_props``
    """

    __slots__ = ("_output", "_props", "props_are_equal")

    def __init__(self, props_are_equal: PropsEqual = shallow_equal):
        self.props_are_equal = props_are_equal
        self._props: Any = _MISSING
        self._output: Any = _MISSING

    @property
    def last_props(self) -> Mapping[str, Any] | None:
        return None if self._props is _MISSING else self._props

    @property
    def last_output(self) -> Any:
        return None if self._output is _MISSING else self._output

    def get_or_compute(
        self, props: Mapping[str, Any], compute: Callable[[Mapping[str, Any]], Any]
    ) -> Any:
        """Return cached output for ``props``, computing it when stale.

        Async output whose task was cancelled (for example when its event
        loop shut down mid-render) is stale too.
        """
        if self._props is not _MISSING and not self.props_are_equal(self._props, props):
            self._output = _MISSING
        elif isinstance(self._output, SharedAwaitable) and self._output.cancelled:
            self._output = _MISSING
        self._props = props
        if self._output is _MISSING:
            output = compute(props)
            if isawaitable(output):
                output = SharedAwaitable(output)
            self._output = output
        return self._output

    def clear(self) -> None:
        self._props = _MISSING
        self._output = _MISSING


def memo(
    component: Callable[..., Any], props_are_equal: PropsEqual = shallow_equal
) -> Callable[..., Any]:
    """Wrap ``component`` so equal consecutive props reuse the last output.

    Only the most recent call is remembered. The wrapper keeps the wrapped
    component's name, so scoped hooks still match it.

    Example:
        >>> Card = memo(Card)
        >>> jsx(Card, {"title": "a"}).render()   # calls Card
        >>> jsx(Card, {"title": "a"}).render()   # cached
        >>> jsx(Card, {"title": "b"}).render()   # calls Card
    """
    cache = MemoCache(props_are_equal)

    @functools.wraps(component)
    def memoized(**props: Any) -> Any:
        return cache.get_or_compute(props, lambda p: component(**p))

    memoized.cache = cache  # type: ignore[attr-defined]
    return memoized
