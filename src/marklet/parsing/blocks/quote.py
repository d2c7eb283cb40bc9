"""Blockquote parsing for the marklet parser.

Quote nesting is driven only by the depth number on each ``>`` line. A map
from depth to the Quote open at that depth decides where each line goes:

    > a          depth 1 -> root quote
    > > b        depth 2 -> new quote under depth 1
    > > c        depth 2 -> same quote as b
    > d          depth 1 -> root quote again

Lines are collected into mutable frames and frozen into Quote nodes once
the quote ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from marklet.nodes import Quote, QuoteItem
from marklet.tokens import BlockQuoteToken, NewLineToken


@dataclass(slots=True)
class _OpenQuote:
    """A Quote still receiving lines."""

    children: list[_OpenQuote | QuoteItem] = field(default_factory=list)

    def freeze(self) -> Quote:
        return Quote(
            tuple(
                child.freeze() if isinstance(child, _OpenQuote) else child
                for child in self.children
            )
        )


class QuoteParsingMixin:
    """Mixin providing blockquote parsing.

    Required Host Attributes:
        - _current: Token | None

    Required Host Methods:
        - _advance() -> Token | None
        - _expect(token_type) -> Token
        - _parse_inline_run(in_quote) -> tuple[Inline, ...]

    """

    def _parse_quote(self) -> Quote:
        """Parse consecutive blockquote lines into one Quote tree.

        The first line always becomes an item of the root quote, and its
        depth becomes the root quote's depth. A line seen at a new depth
        opens a quote under the one at depth - 1, or under the root quote if
        nothing is open there. On later lines a marker followed directly by
        a newline (``>`` alone on a line) is a paragraph break and adds no
        item.
        """
        first = self._expect(BlockQuoteToken)
        root = _OpenQuote([QuoteItem(self._parse_inline_run(in_quote=True))])
        open_quotes: dict[int, _OpenQuote] = {first.depth: root}

        while isinstance(token := self._current, BlockQuoteToken):
            self._advance()
            if isinstance(self._current, NewLineToken):
                self._advance()
                continue

            item = QuoteItem(self._parse_inline_run(in_quote=True))
            quote = open_quotes.get(token.depth)
            if quote is None:
                quote = _OpenQuote()
                open_quotes[token.depth] = quote
                open_quotes.get(token.depth - 1, root).children.append(quote)
            quote.children.append(item)

        return root.freeze()
