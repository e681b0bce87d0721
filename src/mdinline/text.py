"""Extract plain content from mdinline AST nodes.

Tags are dropped and only payload text is kept. Links come out as
``url label`` and images as ``alt url``, the order their fields are
stored in.

Example:
    >>> content_string(Line((OrdinaryText("see"), Link("http://x", "abc"))))
    'see http://x abc'
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


def content_string(node: Node) -> str:
    """Extract plain content from any AST node.

    Lines join their children with a single space and paragraphs join
    their lines with a newline.

    Raises:
        RenderError: If ``node`` is not an AST node.
    """
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
            return node.text
        case HtmlEntities():
            return ""
        case Link():
            return f"{node.url} {node.label}"
        case Image():
            return f"{node.alt} {node.url}"
        case ExtensionInline():
            return " ".join(node.args)
        case Line() | Error():
            return " ".join(content_string(c) for c in node.children)
        case Paragraph():
            return "\n".join(content_string(line) for line in node.children)
        case _:
            raise RenderError(f"Cannot extract content from {type(node).__name__!r}")
