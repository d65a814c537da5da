from __future__ import annotations

import asyncio

import pytest

from jinx import AsyncRenderError, RenderConfig
from jinx.buffer import Literal, Pending, RenderBuffer


async def value(text: str, delay: float = 0) -> str:
    await asyncio.sleep(delay)
    return text


def test_write_and_getvalue() -> None:
    buffer = RenderBuffer()
    buffer.write("<p>")
    buffer.write_escaped("a & b")
    buffer.write("</p>")

    assert not buffer.is_pending
    assert buffer.getvalue() == "<p>a &amp; b</p>"
    assert buffer.finish() == "<p>a &amp; b</p>"


def test_defer_seals_current_run() -> None:
    buffer = RenderBuffer()
    buffer.write("a")
    pending = value("b")
    buffer.defer(pending)
    buffer.write("c")

    segments = buffer.segments
    assert segments[0] == Literal("a")
    assert isinstance(segments[1], Pending)
    assert segments[2] == Literal("c")
    assert buffer.is_pending

    buffer.close()


def test_getvalue_raises_when_pending() -> None:
    buffer = RenderBuffer()
    buffer.defer(value("x"))
    with pytest.raises(AsyncRenderError):
        buffer.getvalue()
    buffer.close()


def test_close_closes_unawaited_coroutines() -> None:
    buffer = RenderBuffer()
    coro = value("x")
    buffer.defer(coro)
    buffer.close()
    assert coro.cr_frame is None


def test_child_shares_config() -> None:
    config = RenderConfig().with_void_tags("x-void")
    buffer = RenderBuffer(config)
    assert buffer.child().config is config


@pytest.mark.asyncio
async def test_resolve_joins_in_document_order() -> None:
    buffer = RenderBuffer()
    buffer.write("<ol>")
    buffer.defer(value("1", 0.02))
    buffer.write("|")
    buffer.defer(value("2", 0.0))
    buffer.write("</ol>")

    result = buffer.finish()
    assert asyncio.iscoroutine(result)
    assert await result == "<ol>1|2</ol>"


@pytest.mark.asyncio
async def test_adjacent_pending_segments() -> None:
    buffer = RenderBuffer()
    buffer.defer(value("a"))
    buffer.defer(value("b"))
    assert len(buffer.segments) == 2
    assert await buffer.resolve() == "ab"
