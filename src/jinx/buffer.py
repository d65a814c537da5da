"""Output buffer with support for not-yet-known content.

A render writes into a ``RenderBuffer``: an ordered sequence of segments,
each either literal text or a pending awaitable that will produce text.
Text written after a pending segment accumulates in a fresh run, so the
segment order is always document order.

    <ul>  Pending(...)  </li><li>b</li></ul>
    └─ Literal ─┘       └────── current run ──────┘

Rendering produces a ``str`` directly when no segment is pending, otherwise
an awaitable that resolves every pending segment and concatenates the lot.

Thread-Safety:
A buffer belongs to a single render call and is never shared.

"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Coroutine
from dataclasses import dataclass
from typing import Any

from jinx.config import DEFAULT_CONFIG, RenderConfig
from jinx.exceptions import AsyncRenderError
from jinx.utils.html import html_escape

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Literal:
    """Text whose content is final."""

    text: str


@dataclass(frozen=True, slots=True)
class Pending:
    """Awaitable that will produce the text occupying this position.

    ``source`` is what ``value`` wraps (a user coroutine or a nested buffer),
    closed together with it when the render is abandoned.
    """

    value: Awaitable[str]
    source: Any = None


Segment = Literal | Pending


class RenderBuffer:
    """Accumulates rendered HTML in document order.

    The current text run uses the StringBuilder pattern (list of parts,
    joined once) so repeated writes stay O(n).

    Attributes:
        config: Render settings shared by every buffer derived from this one
    """

    __slots__ = ("_pending", "_run", "_segments", "config")

    def __init__(self, config: RenderConfig | None = None):
        self._run: list[str] = []
        self._segments: list[Segment] = []
        self._pending = 0
        self.config = config or DEFAULT_CONFIG

    def write(self, text: str) -> None:
        """Append text verbatim to the current run."""
        self._run.append(text)

    def write_escaped(self, value: Any) -> None:
        """Append ``value`` HTML-escaped to the current run."""
        self._run.append(html_escape(value))

    def defer(self, value: Awaitable[str], source: Any = None) -> None:
        """Occupy the current position with a pending value.

        Everything written so far is sealed into a literal segment and a new
        empty run is opened after the pending value.
        """
        self._seal()
        self._segments.append(Pending(value, source))
        self._pending += 1

    def child(self) -> RenderBuffer:
        """Create an empty buffer sharing this buffer's config."""
        return RenderBuffer(self.config)

    @property
    def is_pending(self) -> bool:
        """True if any segment is still awaiting its value."""
        return self._pending > 0

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Segments in document order, including the current run."""
        self._seal()
        return tuple(self._segments)

    def getvalue(self) -> str:
        """Return the rendered text.

        Raises:
            AsyncRenderError: If any segment is pending
        """
        if self._pending:
            raise AsyncRenderError(
                f"Output has {self._pending} pending segment(s); "
                "use `await node.render_async()` instead of str()"
            )
        return "".join(segment.text for segment in self.segments)  # type: ignore[union-attr]

    def finish(self) -> str | Coroutine[Any, Any, str]:
        """Return the text if complete, otherwise a coroutine resolving it."""
        if self._pending:
            return self.resolve()
        return self.getvalue()

    async def resolve(self) -> str:
        """Await every pending segment and join all segments in order.

        Pending values are scheduled together and may complete in any order;
        the output order is fixed by their position. If one fails, the rest
        are cancelled and awaited, and the first failure propagates.
        """
        segments = self.segments
        futures = [
            asyncio.ensure_future(segment.value) if isinstance(segment, Pending) else None
            for segment in segments
        ]
        logger.debug(f"Resolving {self._pending} pending segment(s) of {len(segments)}")

        parts: list[str] = []
        try:
            for segment, future in zip(segments, futures, strict=True):
                if future is None:
                    parts.append(segment.text)  # type: ignore[union-attr]
                else:
                    parts.append(await future)
        except BaseException:
            scheduled = [future for future in futures if future is not None]
            for future in scheduled:
                future.cancel()
            await asyncio.gather(*scheduled, return_exceptions=True)
            raise
        return "".join(parts)

    def close(self) -> None:
        """Close pending coroutines that will never be awaited.

        Recurses into nested buffers so coroutines returned by components
        are closed along with the wrappers that would have awaited them.
        """
        for segment in self._segments:
            if not isinstance(segment, Pending):
                continue
            for value in (segment.value, segment.source):
                if isinstance(value, RenderBuffer):
                    value.close()
                elif asyncio.iscoroutine(value):
                    value.close()

    def _seal(self) -> None:
        if self._run:
            self._segments.append(Literal("".join(self._run)))
            self._run = []

    def __repr__(self) -> str:
        return f"<RenderBuffer segments={len(self.segments)} pending={self._pending}>"
