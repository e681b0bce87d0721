"""Debug projection of the AST.

Every node renders as ``Tag [payload]``. Links and images use markdown
order, label first: ``Link [label](url)``. Paragraphs put each line on its
own row, indented two spaces per level.

Example:
    >>> debug_string(parse(Flavor.STANDARD, "hi [there](x)"))
    'Paragraph\\n  Line [OrdinaryText [hi ], Link [there](x)]'
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


class DebugRenderer:
    """Render any node to its tagged debug form."""

    __slots__ = ()

    def render(self, node: Node) -> str:
        """Render a node (and its children) for inspection.

        Raises:
            RenderError: If ``node`` is not an AST node.
        """
        sb = StringBuilder()
        self._render(node, sb, 0)
        return sb.build()

    def _render(self, node: Node, sb: StringBuilder, depth: int) -> None:
        match node:
            case (
                OrdinaryText()
                | ItalicText()
                | BoldText()
                | Code()
                | InlineMath()
                | StrikeThroughText()
                | BracketedText()
                | HtmlEntity()
                | Stanza()
            ):
                sb.append(type(node).__name__).append(" [").append(node.text).append("]")
            case Link():
                sb.append(f"Link [{node.label}]({node.url})")
            case Image():
                sb.append(f"Image [{node.alt}]({node.url})")
            case ExtensionInline():
                sb.append(f"ExtensionInline [{node.command}]({' '.join(node.args)})")
            case Line() | HtmlEntities() | Error():
                sb.append(type(node).__name__).append(" [")
                for i, child in enumerate(node.children):
                    if i:
                        sb.append(", ")
                    self._render(child, sb, depth)
                sb.append("]")
            case Paragraph():
                sb.append("Paragraph")
                for line in node.children:
                    sb.newline().append_indented("", depth + 1)
                    self._render(line, sb, depth + 1)
            case _:
                raise RenderError(f"Cannot render {type(node).__name__!r}: not an AST node")


_RENDERER = DebugRenderer()


def debug_string(node: Node) -> str:
    """Render a node to its debug form."""
    return _RENDERER.render(node)
