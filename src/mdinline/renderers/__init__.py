"""mdinline renderers.

Renderers project the inline AST onto strings.

Available Renderers:
- HtmlRenderer: reference HTML-like presentation backend
- DebugRenderer: tagged inspection form

Thread Safety:
All renderers build output in a StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from mdinline.renderers.debug import DebugRenderer, debug_string
from mdinline.renderers.html import HtmlRenderer, render_string
from mdinline.renderers.protocol import ASTRenderer

__all__ = [
    "ASTRenderer",
    "DebugRenderer",
    "HtmlRenderer",
    "debug_string",
    "render_string",
]
