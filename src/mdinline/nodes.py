"""Typed inline AST nodes for mdinline.

All AST nodes are frozen dataclasses with slots for:
- Immutability: a parsed tree is never mutated, safe to share across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: every consumer dispatches with ``match`` over the
  closed ``Inline``/``Node`` unions below

Node Hierarchy:
Node (base)
├── Inline (leaf elements of a Line)
│   ├── OrdinaryText
│   ├── ItalicText
│   ├── BoldText
│   ├── Code
│   ├── InlineMath
│   ├── StrikeThroughText
│   ├── BracketedText
│   ├── HtmlEntity
│   ├── HtmlEntities
│   ├── Link
│   ├── Image
│   └── ExtensionInline
├── Line
├── Paragraph
├── Stanza
└── Error

"""

from dataclasses import dataclass
from typing import TypeAlias

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""


# =============================================================================
# Text-payload Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class OrdinaryText(Node):
    """Run of plain characters.

    Also carries diagnostic text when a line fails to parse.

    """

    text: str


@dataclass(frozen=True, slots=True)
class ItalicText(Node):
    """Italic text.

    Markdown: *text*
    Render: <i>text</i>

    """

    text: str


@dataclass(frozen=True, slots=True)
class BoldText(Node):
    """Bold text.

    Markdown: **text**
    Render: <b>text</b>

    """

    text: str


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Inline code.

    Markdown: `code`
    Render: <code>code</code>

    """

    text: str


@dataclass(frozen=True, slots=True)
class InlineMath(Node):
    """Inline math, only recognized by the ExtendedMath flavor.

    Markdown: $a^2$
    Render: $a^2$

    """

    text: str


@dataclass(frozen=True, slots=True)
class StrikeThroughText(Node):
    """Struck-through text.

    Markdown: ~~text~~
    Render: <strikethrough>text</strikethrough>

    """

    text: str


@dataclass(frozen=True, slots=True)
class BracketedText(Node):
    """Bracketed text with no following ``(url)``.

    Markdown: [text]

    """

    text: str


@dataclass(frozen=True, slots=True)
class HtmlEntity(Node):
    """HTML entity name with ``&`` and ``;`` stripped.

    Markdown: &nbsp;
    Render: <span>nbsp</span>

    """

    text: str


@dataclass(frozen=True, slots=True)
class HtmlEntities(Node):
    """Run of consecutive entities.

    No recognizer produces this yet; serializers still accept it.

    """

    children: tuple[HtmlEntity, ...]


# =============================================================================
# Structured Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [label](url)

    """

    url: str
    label: str


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    Markdown: ![alt](url)

    """

    alt: str
    url: str


@dataclass(frozen=True, slots=True)
class ExtensionInline(Node):
    """Generic extension command.

    Markdown: @command[arg1 arg2]

    ``args`` never contains empty strings.

    """

    command: str
    args: tuple[str, ...] = ()


# Type alias for inline elements
Inline: TypeAlias = (
    OrdinaryText
    | ItalicText
    | BoldText
    | Code
    | InlineMath
    | StrikeThroughText
    | BracketedText
    | HtmlEntity
    | HtmlEntities
    | Link
    | Image
    | ExtensionInline
)


# =============================================================================
# Container Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Line(Node):
    """One logical source line, children in left-to-right source order."""

    children: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """A whole parsed block: one Line per logical line, in order."""

    children: tuple[Line, ...] = ()


@dataclass(frozen=True, slots=True)
class Stanza(Node):
    """Pass-through text block. Never inline-parsed."""

    text: str


@dataclass(frozen=True, slots=True)
class Error(Node):
    """Structural wrapper for diagnostic payload."""

    children: tuple[Node, ...] = ()


# Type alias for every node a serializer accepts
AnyNode: TypeAlias = Inline | Line | Paragraph | Stanza | Error
