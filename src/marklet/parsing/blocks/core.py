"""Core block parsing for the marklet parser.

Provides block dispatch and the single-token blocks (headers, code blocks,
rules, images, paragraphs). Quotes and lists live in their own modules.
"""

from __future__ import annotations

from marklet.nodes import (
    Block,
    CodeBlock,
    Header,
    HorizontalRule,
    Image,
    Paragraph,
)
from marklet.tokens import (
    BlockQuoteToken,
    CodeBlockToken,
    CodeInlineToken,
    HeaderToken,
    HorizontalRuleToken,
    ImageToken,
    LinkToken,
    ListItemToken,
    NewLineToken,
    TextToken,
)


class BlockParsingCoreMixin:
    """Core block parsing methods.

    Required Host Attributes:
        - _current: Token | None

    Required Host Methods:
        - _advance() -> Token | None
        - _expect(token_type) -> Token
        - _fail(expected) -> NoReturn
        - _parse_inline_run(ends_at_rule) -> tuple[Inline, ...]
        - _parse_quote() -> Quote
        - _parse_list() -> List

    """

    # Required host attributes (documented, not declared, to avoid override conflicts)
    # _current: Token | None

    def _parse_block(self) -> Block | None:
        """Parse a single block element.

        Returns:
            The parsed block, or None when a blank line was skipped.
        """
        match self._current:
            case NewLineToken():
                self._advance()
                return None  # Skip blank lines

            case HeaderToken(level=level):
                self._advance()
                return Header(level, self._parse_inline_run(ends_at_rule=True))

            case CodeBlockToken(lang=lang, code=code):
                self._advance()
                self._expect(NewLineToken)
                return CodeBlock(lang, code)

            case BlockQuoteToken():
                return self._parse_quote()

            case HorizontalRuleToken():
                self._advance()
                self._expect(NewLineToken)
                return HorizontalRule()

            case ListItemToken():
                return self._parse_list()

            case ImageToken(alt=alt, src=src):
                self._advance()
                self._expect(NewLineToken)
                return Image(alt, src)

            case TextToken() | CodeInlineToken() | LinkToken():
                return Paragraph(self._parse_inline_run())

            case _:
                self._fail("block token")
