"""Inline-run parsing for the marklet parser.

An inline run is the content of one paragraph, header, list item or quote
line: a sequence of Text, CodeInline and Link tokens. A newline inside a
run joins two lines with a single space when the next line starts with an
inline token; any other newline ends the run. Quote lines never join: each
``>`` line is a run of its own.
"""

from __future__ import annotations

from marklet.nodes import CodeInline, Inline, Link, Text
from marklet.tokens import (
    INLINE_TOKEN_TYPES,
    CodeInlineToken,
    HorizontalRuleToken,
    LinkToken,
    NewLineToken,
    TextToken,
)

# Joins the lines of a multi-line run
_LINE_JOIN = Text(" ")


class InlineParsingMixin:
    """Mixin providing inline-run parsing.

    Required Host Methods:
        - _advance() -> Token | None
        - _peek(offset) -> Token | None
        - _expect(token_type) -> Token
        - _fail(expected) -> NoReturn

    """

    # Required host attributes (documented, not declared, to avoid override conflicts)
    # _current: Token | None

    def _parse_inline_run(
        self,
        *,
        ends_at_rule: bool = False,
        in_quote: bool = False,
    ) -> tuple[Inline, ...]:
        """Parse one inline run and consume its terminating newline.

        Args:
            ends_at_rule: Also accept a HorizontalRuleToken as the end of the
                run, leaving it unconsumed (header content at end of input
                is followed directly by the header's rule).
            in_quote: End the run at the first newline. A plain line after a
                quote line starts a new block instead of continuing the quote.

        Raises:
            MarkdownSyntaxError: If the run is not terminated by a newline.
        """
        nodes: list[Inline] = []
        while True:
            token = self._current
            if isinstance(token, INLINE_TOKEN_TYPES):
                nodes.append(self._parse_inline_single())
            elif (
                not in_quote
                and isinstance(token, NewLineToken)
                and isinstance(self._peek(), INLINE_TOKEN_TYPES)
            ):
                self._advance()
                nodes.append(_LINE_JOIN)
            else:
                break

        if not (ends_at_rule and isinstance(self._current, HorizontalRuleToken)):
            self._expect(NewLineToken)
        return tuple(nodes)

    def _parse_inline_single(self) -> Inline:
        """Convert the current inline token into its node."""
        match self._current:
            case TextToken(content=content, bold=bold, italic=italic):
                node: Inline = Text(content, bold, italic)
            case CodeInlineToken(lang=lang, code=code):
                node = CodeInline(lang, code)
            case LinkToken(text=text, href=href):
                node = Link(text, href)
            case _:
                self._fail("inline token")
        self._advance()
        return node
