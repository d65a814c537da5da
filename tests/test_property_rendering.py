"""Property-based tests for rendering.

Uses hypothesis to verify invariants that must hold for all inputs:

- Escaping safety (untrusted text never yields raw markup characters)
- Idempotence (rendering the same tree twice gives the same string)
- Order invariance (async output == synchronous in-place substitution)
"""

from __future__ import annotations

import asyncio
import re

from hypothesis import given, settings
from hypothesis import strategies as st

from jinx import jsx
from jinx.utils.html import html_escape

from .strategies import delayed_texts, node_trees, untrusted_text

_ENTITY_RE = re.compile(r"&(?:amp|lt|gt|quot|#39);")


def _assert_safe(escaped: str) -> None:
    assert not set(escaped) & set("<>\"'")
    assert "&" not in _ENTITY_RE.sub("", escaped)


class TestEscapingProperties:
    """Untrusted text is always neutralized."""

    @given(text=untrusted_text)
    @settings(max_examples=300)
    def test_text_child_is_safe(self, text: str) -> None:
        html = jsx("p", None, text).render()
        assert html.startswith("<p>") and html.endswith("</p>")
        body = html[len("<p>") : -len("</p>")]
        _assert_safe(body)
        assert body == html_escape(text)

    @given(text=untrusted_text)
    @settings(max_examples=300)
    def test_attribute_value_is_safe(self, text: str) -> None:
        html = jsx("a", {"title": text}).render()
        assert html == f'<a title="{html_escape(text)}"></a>'
        _assert_safe(html_escape(text))

    @given(text=untrusted_text)
    @settings(max_examples=100)
    def test_component_text_is_safe(self, text: str) -> None:
        def Echo(value, children=None):
            return value

        assert jsx(Echo, {"value": text}).render() == html_escape(text)


class TestStructuralProperties:
    """Rendering is a pure function of the tree."""

    @given(tree=node_trees)
    @settings(max_examples=200)
    def test_idempotence(self, tree) -> None:
        assert tree.render() == tree.render()

    @given(tree=node_trees)
    @settings(max_examples=100)
    def test_render_async_matches_render(self, tree) -> None:
        assert asyncio.run(tree.render_async()) == tree.render()


class TestOrderInvariance:
    """Completion order never changes the output."""

    @given(items=delayed_texts, wrap=st.booleans())
    @settings(max_examples=100, deadline=None)
    def test_async_equals_sync_substitution(
        self, items: list[tuple[str, int]], wrap: bool
    ) -> None:
        async def resolve_after(text: str, yields: int) -> str:
            for _ in range(yields):
                await asyncio.sleep(0)
            return text

        def build(children):
            if wrap:
                children = [jsx("li", None, child) for child in children]
            return jsx("ul", {"class": "list"}, "head", children, "tail")

        expected = build([text for text, _ in items]).render()
        actual = asyncio.run(
            build([resolve_after(text, yields) for text, yields in items]).render_async()
        )
        assert actual == expected
