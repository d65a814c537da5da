"""Render configuration.

``RenderConfig`` is immutable and travels with the output buffer, so the
asynchronous tail of a render sees exactly the settings its synchronous
phase started with.

Example:
    >>> from jinx import jsx
    >>> from jinx.config import DEFAULT_CONFIG
    >>> config = DEFAULT_CONFIG.with_void_tags("frame")
    >>> jsx("frame", {"src": "a.html"}).render(config)
    '<frame src="a.html"/>'

"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from jinx.utils.constants import BOOLEAN_ATTRIBUTES, VOID_TAGS


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Settings consulted by the element serializer.

    Attributes:
        void_tags: Tag names serialized in self-closing form with no children
        boolean_attributes: Attribute names rendered bare when True and
            omitted when False
    """

    void_tags: frozenset[str] = field(default=VOID_TAGS)
    boolean_attributes: frozenset[str] = field(default=BOOLEAN_ATTRIBUTES)

    def with_void_tags(self, *names: str) -> RenderConfig:
        """Return a copy with additional void tag names."""
        return replace(self, void_tags=self.void_tags | frozenset(names))

    def with_boolean_attributes(self, *names: str) -> RenderConfig:
        """Return a copy with additional boolean attribute names."""
        return replace(
            self, boolean_attributes=self.boolean_attributes | frozenset(names)
        )


DEFAULT_CONFIG = RenderConfig()
