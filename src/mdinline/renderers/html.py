"""Reference HTML-like renderer.

A default mapping of the inline AST onto tags. It is deliberately
shallow: links and images are emitted in a readable textual form rather
than as anchors, extension commands become spans, and text is written
verbatim (no escaping).

Thread Safety:
All per-render state lives in a StringBuilder created per render() call.
Multiple threads can share one HtmlRenderer instance.
"""

from mdinline.errors import RenderError
from mdinline.nodes import (
    BoldText,
    BracketedText,
    Code,
    Error,
    ExtensionInline,
    HtmlEntities,
    HtmlEntity,
    Image,
    InlineMath,
    ItalicText,
    Line,
    Link,
    Node,
    OrdinaryText,
    Paragraph,
    Stanza,
    StrikeThroughText,
)
from mdinline.stringbuilder import StringBuilder
from mdinline.utils.logger import get_logger

logger = get_logger(__name__)

# Extension command rendered as a styled span
CLASS_COMMAND = "class"


class HtmlRenderer:
    """Render AST to HTML-like markup.

    Usage:
        >>> HtmlRenderer().render(Line((OrdinaryText("a "), BoldText("b"))))
        'a <b>b</b>'

    Thread Safety:
        Stateless; safe to share across threads.
    """

    __slots__ = ()

    def render(self, node: Node) -> str:
        """Render a node to markup.

        Raises:
            RenderError: If ``node`` is not an AST node.
        """
        sb = StringBuilder()
        self._render(node, sb, 0)
        return sb.build()

    def _render(self, node: Node, sb: StringBuilder, depth: int) -> None:
        match node:
            case OrdinaryText() | Stanza():
                sb.append(node.text)
            case ItalicText():
                sb.append("<i>").append(node.text).append("</i>")
            case BoldText():
                sb.append("<b>").append(node.text).append("</b>")
            case Code():
                sb.append("<code>").append(node.text).append("</code>")
            case InlineMath():
                sb.append("$").append(node.text).append("$")
            case StrikeThroughText():
                sb.append("<strikethrough>").append(node.text).append("</strikethrough>")
            case HtmlEntity():
                sb.append("<span>").append(node.text).append("</span>")
            case BracketedText():
                sb.append("[").append(node.text).append("]")
            case Link():
                sb.append(f"Link [{node.label}]({node.url})")
            case Image():
                sb.append(f"Image [{node.alt}]({node.url})")
            case ExtensionInline():
                self._render_extension(node, sb)
            case Line() | HtmlEntities() | Error():
                for child in node.children:
                    self._render(child, sb, depth)
            case Paragraph():
                self._render_paragraph(node, sb, depth)
            case _:
                raise RenderError(f"Cannot render {type(node).__name__!r}: not an AST node")

    def _render_extension(self, node: ExtensionInline, sb: StringBuilder) -> None:
        """``@class[c rest]`` styles its remaining args; anything else is shown as an op."""
        if node.command == CLASS_COMMAND and node.args:
            css_class, *rest = node.args
            sb.append(f"<span class={css_class}>").append(" ".join(rest)).append("</span>")
            return
        logger.debug("Rendering extension command %r as a generic span", node.command)
        sb.append("<span>Op ").append(" ".join((node.command, *node.args))).append("</span>")

    def _render_paragraph(self, node: Paragraph, sb: StringBuilder, depth: int) -> None:
        sb.append("<p>").newline()
        for line in node.children:
            sb.append_indented("", depth + 1)
            self._render(line, sb, depth + 1)
            sb.newline()
        sb.append_indented("</p>", depth)


_RENDERER = HtmlRenderer()


def render_string(node: Node) -> str:
    """Render a node with the reference HTML-like backend."""
    return _RENDERER.render(node)
