"""Recursive descent parser producing the typed tree.

Consumes the token list from the Lexer and builds immutable nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal and required-consume checks
- `InlineParsingMixin`: Inline runs
- `BlockParsingMixin`: Block dispatch, quotes and lists

Thread Safety:
- Parser produces an immutable tree (frozen dataclasses)
- Safe to share the tree across threads

"""

from __future__ import annotations

from collections.abc import Sequence

from marklet.nodes import Block, Root
from marklet.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    TokenNavigationMixin,
)
from marklet.tokens import Token


class Parser(
    TokenNavigationMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Recursive descent parser for marklet tokens.

    A single forward cursor walks the token list; there is no backtracking.
    Every required token is checked, and any mismatch aborts the whole parse
    with a MarkdownSyntaxError.

    Usage:
            >>> from marklet.tokens import NewLineToken, TextToken
            >>> Parser([TextToken("text"), NewLineToken()]).parse()
        Root(children=(Paragraph(children=(Text(content='text', bold=False, italic=False),)),))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The resulting tree is immutable and thread-safe.

    """

    __slots__ = (
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
        "_source_file",
    )

    def __init__(
        self,
        tokens: Sequence[Token],
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with a token list.

        Args:
            tokens: Tokens produced by the Lexer
            source_file: Optional source file path for error messages

        """
        self._tokens = tokens
        self._tokens_len = len(tokens)
        self._pos = 0
        self._current: Token | None = tokens[0] if tokens else None
        self._source_file = source_file

    def parse(self) -> Root:
        """Parse the tokens into a document tree.

        Returns:
            Root node holding the blocks in document order

        Raises:
            MarkdownSyntaxError: On any unexpected token or premature end of
                the token stream.
        """
        blocks: list[Block] = []
        while not self._at_end():
            block = self._parse_block()
            if block is not None:
                blocks.append(block)

        return Root(tuple(blocks))
