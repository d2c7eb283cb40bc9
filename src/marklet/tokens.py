"""Token definitions for the marklet lexer.

The lexer produces a flat list of tokens that the parser consumes. Tokens are
a closed set of frozen dataclasses, one per kind, so the parser can dispatch
with ``isinstance`` checks or ``match`` statements.

Block-level kinds:   HeaderToken, ListItemToken, CodeBlockToken,
                     BlockQuoteToken, HorizontalRuleToken, NewLineToken
Inline-level kinds:  TextToken, CodeInlineToken, LinkToken, ImageToken

Every token records the source line it started on. The line number is only
used for error messages; it is excluded from equality and repr so token
sequences compare by content.

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class _TokenBase:
    """Fields shared by every token kind."""

    lineno: int = field(default=0, kw_only=True, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class HeaderToken(_TokenBase):
    """ATX (``## Title``) or setext (``Title`` / ``===``) header start."""

    level: int


@dataclass(frozen=True, slots=True)
class TextToken(_TokenBase):
    """A run of literal text, optionally bold and/or italic.

    Emphasis markers are already stripped from ``content``.
    """

    content: str
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True, slots=True)
class ListItemToken(_TokenBase):
    """List item marker (``- ``, ``* `` or ``1. ``).

    Attributes:
        indent: Nesting level reported by the source (leading spaces divided
            by the configured indent size)
        ordered: True for ``N.`` markers
        digit: The single digit of an ordered marker, None when unordered
    """

    indent: int
    ordered: bool
    digit: int | None = None


@dataclass(frozen=True, slots=True)
class CodeBlockToken(_TokenBase):
    """Fenced code block with its verbatim body."""

    lang: str
    code: str


@dataclass(frozen=True, slots=True)
class CodeInlineToken(_TokenBase):
    """Inline code span (`` `code`lang ``)."""

    lang: str
    code: str


@dataclass(frozen=True, slots=True)
class BlockQuoteToken(_TokenBase):
    """Blockquote line marker; depth is the number of ``>`` markers."""

    depth: int


@dataclass(frozen=True, slots=True)
class ImageToken(_TokenBase):
    """Image (``![alt](src)``)."""

    alt: str
    src: str


@dataclass(frozen=True, slots=True)
class LinkToken(_TokenBase):
    """Hyperlink (``[text](href)``)."""

    text: str
    href: str


@dataclass(frozen=True, slots=True)
class HorizontalRuleToken(_TokenBase):
    """Horizontal rule; also emitted after every header."""


@dataclass(frozen=True, slots=True)
class NewLineToken(_TokenBase):
    """End of a line. Terminates blocks and every token sequence."""


Token = (
    HeaderToken
    | TextToken
    | ListItemToken
    | CodeBlockToken
    | CodeInlineToken
    | BlockQuoteToken
    | ImageToken
    | LinkToken
    | HorizontalRuleToken
    | NewLineToken
)

# Tokens that may appear inside an inline run (paragraph, header, list item, quote item)
INLINE_TOKEN_TYPES: tuple[type, ...] = (TextToken, CodeInlineToken, LinkToken)


__all__ = [
    "INLINE_TOKEN_TYPES",
    "BlockQuoteToken",
    "CodeBlockToken",
    "CodeInlineToken",
    "HeaderToken",
    "HorizontalRuleToken",
    "ImageToken",
    "LinkToken",
    "ListItemToken",
    "NewLineToken",
    "TextToken",
    "Token",
]
