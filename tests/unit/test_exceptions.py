from __future__ import annotations

from jinx.exceptions import (
    AsyncRenderError,
    ErrorCode,
    InnerHTMLConflictError,
    InvalidNodeError,
    RenderError,
)


def test_error_codes_have_docs_and_category() -> None:
    assert ErrorCode.INNER_HTML_CONFLICT.docs_url.endswith("#j-run-001")
    assert ErrorCode.INNER_HTML_CONFLICT.category == "render"
    assert ErrorCode.INVALID_NODE.category == "node"


def test_hierarchy() -> None:
    assert issubclass(InnerHTMLConflictError, RenderError)
    assert issubclass(AsyncRenderError, RenderError)
    assert issubclass(InvalidNodeError, RenderError)
    assert issubclass(InvalidNodeError, TypeError)


def test_format_compact_prefixes_code_and_docs() -> None:
    error = InvalidNodeError(42)
    compact = error.format_compact()
    assert compact.splitlines()[0] == "J-NOD-001: Invalid node: expected Node, got int"
    assert "Docs: " in compact
    assert error.value == 42


def test_format_compact_without_code() -> None:
    assert RenderError("plain").format_compact() == "plain"
