"""ASTRenderer protocol: stable interface for AST projections.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
``HtmlRenderer`` is the reference presentation backend; ``DebugRenderer``
is the inspection form.

Example:
    from mdinline.renderers.protocol import ASTRenderer

    def render_block(renderer: ASTRenderer, paragraph: Paragraph) -> str:
        return renderer.render(paragraph)

"""

from typing import Protocol

from mdinline.nodes import AnyNode


class ASTRenderer(Protocol):
    """Protocol for AST renderers.

    Implementations must accept any AST node and return a string without
    raising for well-formed trees.

    """

    def render(self, node: AnyNode) -> str:
        """Render an AST node to a string."""
        ...
