"""Typed tree nodes for marklet.

All nodes are frozen dataclasses with slots, so a returned tree is immutable
and pattern matching works naturally. Children are tuples in document order.

Node Hierarchy:
Root
├── Header           (inline children)
├── Paragraph        (inline children)
├── CodeBlock
├── HorizontalRule
├── Image
├── Quote            (Quote | QuoteItem children)
│   └── QuoteItem    (inline children)
└── List             (ListItem children)
    └── ListItem     (inline children and nested List)

Inline: Text, CodeInline, Link

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text, optionally bold and/or italic.

    HTML: content, wrapped as <i><b>content</b></i> as flagged

    """

    content: str
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True, slots=True)
class CodeInline:
    """Inline code.

    Markdown: `code`lang
    HTML: <code class="lang">code</code>

    """

    lang: str
    code: str


@dataclass(frozen=True, slots=True)
class Link:
    """Hyperlink.

    Markdown: [text](href)
    HTML: <a href="href">text</a>

    """

    text: str
    href: str


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Header:
    """Header (ATX or setext).

    HTML: <h1>...</h1> through <h6>...</h6>

    """

    level: int
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph:
    """A run of inline content at block level."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Fenced code block. The body is kept verbatim."""

    lang: str
    code: str


@dataclass(frozen=True, slots=True)
class HorizontalRule:
    """Horizontal rule (also follows every header)."""


@dataclass(frozen=True, slots=True)
class Image:
    """Standalone image.

    Markdown: ![alt](src)
    HTML: <img alt="alt" src="src"/>

    """

    alt: str
    src: str


@dataclass(frozen=True, slots=True)
class QuoteItem:
    """One line of a blockquote, rendered as its own paragraph."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Quote:
    """Blockquote.

    Deeper quotes are nested Quote children interleaved, in document order,
    with the QuoteItem lines at this depth.

    """

    children: tuple[Quote | QuoteItem, ...]


@dataclass(frozen=True, slots=True)
class ListItem:
    """List item.

    Holds the item's inline content; a nested list appears as a List child
    of the item it is nested under.

    """

    children: tuple[Inline | List, ...]


@dataclass(frozen=True, slots=True)
class List:
    """Ordered (<ol>) or unordered (<ul>) list."""

    ordered: bool
    children: tuple[ListItem, ...]


@dataclass(frozen=True, slots=True)
class Root:
    """Document root."""

    children: tuple[Block, ...]


# =============================================================================
# Type Aliases
# =============================================================================

Inline = Text | CodeInline | Link

Block = Header | Paragraph | CodeBlock | HorizontalRule | Image | Quote | List

Node = Root | Block | QuoteItem | ListItem | Inline


__all__ = [
    "Block",
    "CodeBlock",
    "CodeInline",
    "Header",
    "HorizontalRule",
    "Image",
    "Inline",
    "Link",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "Quote",
    "QuoteItem",
    "Root",
    "Text",
]
