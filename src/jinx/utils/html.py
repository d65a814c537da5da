"""HTML escaping primitives.

Provides the ``Markup`` marker type for pre-escaped content and a single-pass
``html_escape`` built on ``str.translate()``.

Thread-Safety:
The translation table is built once at import and never mutated.

"""

from __future__ import annotations

from typing import Any

# & must be handled in the same pass as the others; str.translate() does
# that naturally since it maps each source character exactly once.
_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)


class Markup(str):
    """A string that is already safe to emit as HTML.

    Anything implementing ``__html__`` is treated as pre-escaped by the
    serializer; ``Markup`` is the plain-string form of that contract.

    Example:
        >>> Markup("<b>bold</b>").__html__()
        '<b>bold</b>'
        >>> Markup.escape("<b>")
        Markup('&lt;b&gt;')
    """

    __slots__ = ()

    def __new__(cls, value: Any = "") -> Markup:
        if hasattr(value, "__html__") and not isinstance(value, str):
            value = value.__html__()
        return super().__new__(cls, value)

    def __html__(self) -> str:
        return str(self)

    def __add__(self, other: object) -> Markup:
        if isinstance(other, str):
            return Markup(str(self) + html_escape(other))
        return NotImplemented

    def __radd__(self, other: object) -> Markup:
        if isinstance(other, str):
            return Markup(html_escape(other) + str(self))
        return NotImplemented

    def __repr__(self) -> str:
        return f"Markup({str.__repr__(self)})"

    @classmethod
    def escape(cls, value: Any) -> Markup:
        """Escape ``value`` unless it is already markup."""
        if hasattr(value, "__html__"):
            return cls(value.__html__())
        return cls(html_escape(value))


def html_escape(value: Any) -> str:
    """HTML-escape a value.

    Values exposing ``__html__`` are returned as their markup unchanged.
    Everything else is converted with ``str()`` and escaped.

    Complexity: O(n) single pass.
    """
    if hasattr(value, "__html__"):
        return value.__html__()
    if not isinstance(value, str):
        value = str(value)
    return value.translate(_ESCAPE_TABLE)


def is_escaped(value: Any) -> bool:
    """True if ``value`` carries the pre-escaped marker (``__html__``)."""
    return hasattr(value, "__html__")


def raw(value: Any) -> Markup:
    """Wrap ``value`` as already-escaped HTML, exempting it from escaping.

    Example:
        >>> from jinx import jsx, raw
        >>> jsx("p", None, raw("<em>hi</em>")).render()
        '<p><em>hi</em></p>'
    """
    return Markup(value if isinstance(value, str) else str(value))
