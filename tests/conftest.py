"""Pytest configuration and fixtures for jinx tests."""

from __future__ import annotations

import pytest

from jinx import Context, Node, create_context


@pytest.fixture
def theme() -> Context[str]:
    """A fresh context with default value 'light'."""
    return create_context("light", name="theme")


def render_sync(node: Node) -> str:
    """Render ``node`` and assert the result was produced synchronously."""
    result = node.render()
    assert isinstance(result, str), f"expected synchronous output, got {result!r}"
    return result


def assert_html_equal(actual: str, expected: str) -> None:
    """Assert rendered HTML equals expected, with a readable diff message."""
    assert actual == expected, (
        f"Rendered HTML mismatch:\n"
        f"  Actual:   {actual!r}\n"
        f"  Expected: {expected!r}"
    )
