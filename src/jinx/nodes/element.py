"""Element nodes and attribute encoding."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, ClassVar

from jinx.buffer import RenderBuffer
from jinx.exceptions import InnerHTMLConflictError
from jinx.hooks import EmitterChain
from jinx.nodes.base import Node, NodeKind, render_children
from jinx.utils.constants import INNER_HTML_PROP
from jinx.utils.html import Markup

_UPPERCASE_RE = re.compile(r"[A-Z]")


def style_to_css(style: Mapping[str, Any]) -> str:
    """Flatten a style mapping into ``property:value`` pairs joined by ``;``.

    Camel-case property names become kebab-case. None values are skipped.

    Example:
        >>> style_to_css({"fontSize": "12px", "color": "red"})
        'font-size:12px;color:red'
    """
    return ";".join(
        f"{_UPPERCASE_RE.sub(lambda m: '-' + m.group(0).lower(), key)}:{value}"
        for key, value in style.items()
        if value is not None
    )


def _inner_html(value: Any) -> Markup:
    if isinstance(value, Mapping):
        value = value["__html"]
    return Markup(value)


class ElementNode(Node):
    """An HTML element: open tag, attributes, children, close tag.

    Void tags (see ``RenderConfig.void_tags``) end in ``/>`` right after
    their attributes; their children are never rendered.
    """

    __slots__ = ()

    kind: ClassVar[NodeKind] = NodeKind.ELEMENT

    def _serialize(self, buffer: RenderBuffer, emitters: EmitterChain) -> None:
        tag = self._tag
        config = buffer.config
        children: list[Any] = self.children

        buffer.write(f"<{tag}")

        for key, value in self.props.items():
            if key == "style" and isinstance(value, Mapping):
                buffer.write(' style="')
                buffer.write_escaped(style_to_css(value))
                buffer.write('"')
            elif value is None:
                continue
            elif key == INNER_HTML_PROP:
                if children:
                    raise InnerHTMLConflictError(tag)
                children = [_inner_html(value)]
            elif isinstance(value, str) and not hasattr(value, "__html__"):
                buffer.write(f' {key}="')
                buffer.write_escaped(value)
                buffer.write('"')
            elif isinstance(value, (int, float)) and not isinstance(value, bool):
                buffer.write(f' {key}="{value}"')
            elif hasattr(value, "__html__"):
                buffer.write(f' {key}="{value.__html__()}"')
            elif isinstance(value, bool) and key in config.boolean_attributes:
                if value:
                    buffer.write(f' {key}=""')
            else:
                if isinstance(value, bool):
                    value = "true" if value else "false"
                buffer.write(f' {key}="')
                buffer.write_escaped(str(value))
                buffer.write('"')

        if tag in config.void_tags:
            buffer.write("/>")
            return

        buffer.write(">")
        render_children(children, buffer, emitters)
        buffer.write(f"</{tag}>")
