"""Shared constants for jinx.

Tag and attribute catalogs used by the element serializer.
"""

from __future__ import annotations

# Elements that never have children or a closing tag.
# Source: WHATWG HTML Living Standard (void elements) plus legacy keygen/param
VOID_TAGS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Attributes whose presence alone means "true".
# A True value renders as name="", False omits the attribute.
BOOLEAN_ATTRIBUTES: frozenset[str] = frozenset(
    {
        "allowfullscreen",
        "async",
        "autofocus",
        "autoplay",
        "checked",
        "controls",
        "default",
        "defer",
        "disabled",
        "formnovalidate",
        "hidden",
        "inert",
        "ismap",
        "itemscope",
        "loop",
        "multiple",
        "muted",
        "nomodule",
        "novalidate",
        "open",
        "playsinline",
        "readonly",
        "required",
        "reversed",
        "selected",
    }
)

# Prop that substitutes raw HTML for an element's children.
INNER_HTML_PROP = "dangerously_set_inner_html"

# Sentinel tag name for fragments.
FRAGMENT_TAG = ""
