"""Exceptions for the jinx renderer.

Exception Hierarchy:
RenderError (base)
├── InnerHTMLConflictError    # children and dangerously_set_inner_html both given
├── AsyncRenderError          # synchronous str() of a tree with pending content
└── InvalidNodeError          # jsx_node() applied to a non-Node

Listener exceptions and failures of pending values are never wrapped; they
reach the caller exactly as raised.

Example:
    ```
    J-RUN-001: Can only set one of `children` or `dangerously_set_inner_html` on <div>
      Docs: https://jinx.readthedocs.io/en/latest/errors.html#j-run-001
    ```

"""

from __future__ import annotations

from enum import Enum

_JINX_DOCS_BASE = "https://jinx.readthedocs.io/en/latest/errors.html"


class ErrorCode(Enum):
    """Searchable error codes for jinx errors.

    Format: J-{CATEGORY}-{NUMBER}
    Categories: RUN (rendering), NOD (node handling)
    """

    # Rendering errors (J-RUN-xxx)
    INNER_HTML_CONFLICT = "J-RUN-001"
    PENDING_IN_SYNC_RENDER = "J-RUN-002"

    # Node handling errors (J-NOD-xxx)
    INVALID_NODE = "J-NOD-001"

    @property
    def docs_url(self) -> str:
        """Documentation URL for this error code."""
        return f"{_JINX_DOCS_BASE}#{self.value.lower()}"

    @property
    def category(self) -> str:
        """Error category ('render' or 'node')."""
        prefix = self.value.split("-")[1]
        return {"RUN": "render", "NOD": "node"}.get(prefix, "unknown")


class RenderError(Exception):
    """Base exception for all jinx errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format error as a short diagnostic with code and docs link."""
        header = str(self)
        if self.code and self.code.value not in header:
            header = f"{self.code.value}: {header}"
        parts = [header]
        if self.code:
            parts.append(f"  Docs: {self.code.docs_url}")
        return "\n".join(parts)


class InnerHTMLConflictError(RenderError):
    """An element received both children and raw inner HTML.

    Raised while serializing the offending element. This is a caller bug
    and is never recovered from.
    """

    code: ErrorCode | None = ErrorCode.INNER_HTML_CONFLICT

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(
            f"Can only set one of `children` or `dangerously_set_inner_html` on <{tag}>"
        )


class AsyncRenderError(RenderError):
    """A tree with asynchronous content was rendered synchronously.

    ``str(node)`` can only produce text when nothing in the tree is pending;
    use ``await node.render_async()`` otherwise.
    """

    code: ErrorCode | None = ErrorCode.PENDING_IN_SYNC_RENDER


class InvalidNodeError(RenderError, TypeError):
    """A value that is not a Node was passed where a Node is required."""

    code: ErrorCode | None = ErrorCode.INVALID_NODE

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid node: expected Node, got {type(value).__name__}")
