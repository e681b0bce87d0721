"""mdinline: inline markdown grammar engine.

Turns one block's raw text into a typed inline AST: bold, italic,
strikethrough, code, inline math, links, images, HTML entities, bracketed
text and ``@command[args]`` extensions. Block splitting and final
presentation belong to the surrounding pipeline.

Quick Start:
    >>> from mdinline import parse, render_string
    >>> paragraph = parse("extended", "Hello **World**")
    >>> render_string(paragraph)
    '<p>\\n  Hello <b>World</b>\\n</p>'

    >>> # Or use the high-level Markdown class
    >>> from mdinline import Markdown
    >>> md = Markdown(flavor="extended_math")
    >>> md("$a^2$")
    '<p>\\n  $a^2$\\n</p>'

Flavors:
    standard       code, images, links, bold, italic
    extended       + strikethrough, HTML entities, @extensions
    extended_math  + $inline math$
"""

from collections.abc import Callable, Iterable
from dataclasses import replace

from mdinline.cache import DictLineCache, LineCache, line_key
from mdinline.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from mdinline.diagnostics import build_error_node
from mdinline.errors import (
    FlavorError,
    MdInlineError,
    ParseError,
    RenderError,
    SerializationError,
)
from mdinline.flavor import Flavor
from mdinline.nodes import (
    AnyNode,
    BoldText,
    BracketedText,
    Code,
    Error,
    ExtensionInline,
    HtmlEntities,
    HtmlEntity,
    Image,
    Inline,
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
from mdinline.parser import Parser
from mdinline.preprocess import wrap
from mdinline.profiling import ParseAccumulator, get_parse_accumulator, profiled_parse
from mdinline.renderers.debug import DebugRenderer, debug_string
from mdinline.renderers.html import HtmlRenderer, render_string
from mdinline.renderers.protocol import ASTRenderer
from mdinline.serialization import from_dict, from_json, to_dict, to_json
from mdinline.text import content_string

__version__ = "0.1.0"


def _parse_with_config(
    source: str,
    source_file: str | None,
    cache: LineCache | None,
) -> Paragraph:
    """Parse under the active config; caller owns the ContextVar."""
    paragraph = Parser(source, source_file=source_file, cache=cache).parse()
    acc = get_parse_accumulator()
    if acc is not None:
        acc.record_parse(paragraph)
    return paragraph


def parse(
    flavor: Flavor | str,
    text: str,
    *,
    source_file: str | None = None,
    cache: LineCache | None = None,
) -> Paragraph:
    """Parse a block's raw text into a Paragraph.

    Other settings (strictness, line wrapping, text transformer) are taken
    from the active ParseConfig; only the flavor is overridden.

    Args:
        flavor: ``Flavor`` or flavor name ("standard", "extended", "extended_math")
        text: Raw block text, block-level markup already removed
        source_file: Optional source file path for error messages
        cache: Optional per-line cache; unchanged lines reuse their Line node

    Returns:
        Paragraph with one Line per logical line

    Raises:
        FlavorError: If ``flavor`` is an unknown name.
        ParseError: Only in strict mode, when a line fails totally.

    Example:
        >>> parse("extended", "*foo*")
        Paragraph(children=(Line(children=(ItalicText(text='foo'),)),))
    """
    config = replace(get_parse_config(), flavor=Flavor.from_name(flavor))
    with parse_config_context(config):
        return _parse_with_config(text, source_file, cache)


class Markdown:
    """High-level processor combining parser and renderer.

    Usage:
        >>> md = Markdown(flavor="extended")
        >>> md("~~old~~ new")
        '<p>\\n  <strikethrough>old</strikethrough> new\\n</p>'

        >>> # Access the AST
        >>> md.parse("[abc](http://x)").children[0].children[0]
        Link(url='http://x', label='abc')

    Thread Safety:
        Config is immutable and applied through a ContextVar per call.
        Safe to use one instance from several threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        flavor: Flavor | str = Flavor.STANDARD,
        *,
        wrap_lines: bool = True,
        strict: bool = False,
        text_transformer: Callable[[str], str] | None = None,
        renderer: ASTRenderer | None = None,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            flavor: Grammar to use
            wrap_lines: Merge wrapped physical lines before parsing
            strict: Raise ParseError instead of rendering diagnostics
            text_transformer: Optional callback applied to ordinary text
            renderer: Output backend (defaults to HtmlRenderer)

        Raises:
            FlavorError: If ``flavor`` is an unknown name.
        """
        self._config = ParseConfig(
            flavor=Flavor.from_name(flavor),
            wrap_lines=wrap_lines,
            strict=strict,
            text_transformer=text_transformer,
        )
        self._renderer: ASTRenderer = renderer or HtmlRenderer()

    @property
    def config(self) -> ParseConfig:
        """Configuration applied to every parse."""
        return self._config

    def __call__(self, text: str) -> str:
        """Parse and render in one call."""
        return self.render(self.parse(text))

    def parse(
        self,
        text: str,
        *,
        source_file: str | None = None,
        cache: LineCache | None = None,
    ) -> Paragraph:
        """Parse text into a Paragraph."""
        with parse_config_context(self._config):
            return _parse_with_config(text, source_file, cache)

    def parse_many(
        self,
        texts: Iterable[str],
        *,
        source_file: str | None = None,
        cache: LineCache | None = None,
    ) -> list[Paragraph]:
        """Parse several blocks, setting the config once.

        Lines repeated across the batch are parsed once when a cache is given.
        """
        with parse_config_context(self._config):
            return [_parse_with_config(text, source_file, cache) for text in texts]

    def render(self, node: AnyNode) -> str:
        """Render an AST node with this processor's renderer."""
        return self._renderer.render(node)


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "parse",
    "wrap",
    "Flavor",
    "Markdown",
    "Parser",
    # Serializers
    "debug_string",
    "content_string",
    "render_string",
    "ASTRenderer",
    "DebugRenderer",
    "HtmlRenderer",
    # Nodes
    "AnyNode",
    "Node",
    "Inline",
    "OrdinaryText",
    "ItalicText",
    "BoldText",
    "Code",
    "InlineMath",
    "StrikeThroughText",
    "BracketedText",
    "HtmlEntity",
    "HtmlEntities",
    "Link",
    "Image",
    "ExtensionInline",
    "Line",
    "Paragraph",
    "Stanza",
    "Error",
    # Diagnostics
    "build_error_node",
    # Errors
    "MdInlineError",
    "ParseError",
    "FlavorError",
    "RenderError",
    "SerializationError",
    # Line cache
    "DictLineCache",
    "LineCache",
    "line_key",
    # Profiling
    "ParseAccumulator",
    "get_parse_accumulator",
    "profiled_parse",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
