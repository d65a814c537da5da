"""jinx — JSX-style server-side HTML rendering for Python.

Build a tree of nodes with ``jsx()`` and render it to an HTML string.
Rendering is synchronous until something in the tree is awaitable; then
``render()`` returns a coroutine that resolves to the full document, in
document order no matter when each awaitable finishes.

Quickstart:
    >>> from jinx import jsx
    >>> jsx("div", {"class": "a", "hidden": False, "title": None}, "hi", 42).render()
    '<div class="a">hi42</div>'

Components:
    >>> def Greeting(name, children=None):
    ...     return jsx("p", None, "Hello, ", name)
    >>> jsx(Greeting, {"name": "<World>"}).render()
    '<p>Hello, &lt;World&gt;</p>'

Async:
    >>> async def User(id, children=None):
    ...     user = await db.fetch_user(id)
    ...     return jsx("span", None, user.name)
    >>> html = await jsx("div", None, jsx(User, {"id": 1})).render_async()

Architecture:
Node tree → Serializer → RenderBuffer (Literal | Pending segments) → str

- **Nodes** (``jinx.nodes``): element, component and fragment variants
- **Buffer** (``jinx.buffer``): ordered segments, async linearization
- **Hooks** (``jinx.hooks``): per-node render/after_render listeners
- **Context** (``jinx.context``): task-local scoped values via Provider
- **Memo** (``jinx.memo``): single-slot component output cache

"""

from jinx.buffer import RenderBuffer
from jinx.config import DEFAULT_CONFIG, RenderConfig
from jinx.context import Context, ProviderState, create_context, use_context
from jinx.exceptions import (
    AsyncRenderError,
    ErrorCode,
    InnerHTMLConflictError,
    InvalidNodeError,
    RenderError,
)
from jinx.hooks import RenderEvent
from jinx.memo import MemoCache, memo, shallow_equal
from jinx.nodes import (
    ComponentNode,
    ElementNode,
    Fragment,
    FragmentNode,
    Node,
    NodeKind,
    jsx,
    jsx_node,
)
from jinx.utils.html import Markup, html_escape, raw

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "AsyncRenderError",
    "ComponentNode",
    "Context",
    "ElementNode",
    "ErrorCode",
    "Fragment",
    "FragmentNode",
    "InnerHTMLConflictError",
    "InvalidNodeError",
    "Markup",
    "MemoCache",
    "Node",
    "NodeKind",
    "ProviderState",
    "RenderBuffer",
    "RenderConfig",
    "RenderError",
    "RenderEvent",
    "create_context",
    "html_escape",
    "jsx",
    "jsx_node",
    "memo",
    "raw",
    "shallow_equal",
    "use_context",
]
