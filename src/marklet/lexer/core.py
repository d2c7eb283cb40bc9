"""Cursor-based lexer producing the token list consumed by the parser.

The source string is never re-sliced into a shrinking remainder. The lexer
keeps it immutable and advances an integer cursor; every step consumes at
least one character, so tokenization terminates for any finite input.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; configuration is read once at construction.

"""

from __future__ import annotations

from marklet.config import get_compile_config
from marklet.errors import MarkdownSyntaxError
from marklet.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
)
from marklet.lexer.scanners import BlockScannerMixin, LineScannerMixin
from marklet.tokens import NewLineToken, Token
from marklet.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Inline line scanning; listed first so it overrides the classifiers' stubs
    LineScannerMixin,
    # Classifiers (one block construct each)
    HeadingClassifierMixin,
    FenceClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
    ListClassifierMixin,
    # Priority dispatch over the classifiers
    BlockScannerMixin,
):
    """Markdown lexer.

    Block recognizers are tried in a fixed priority order at every line
    start (see ``BlockScannerMixin._scan_block``); a line no recognizer claims
    is scanned for inline spans.

    Usage:
            >>> Lexer("# Hello").tokenize()
        [HeaderToken(level=1), TextToken(content='Hello', bold=False, italic=False),
         HorizontalRuleToken(), NewLineToken()]

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_pos",
        "_lineno",
        "_tokens",
        "_list_indent_size",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._pos = 0
        self._lineno = 1
        self._tokens: list[Token] = []
        self._list_indent_size = get_compile_config().list_indent_size

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source.

        Returns:
            Token list; when non-empty it always ends with a NewLineToken.

        Raises:
            MarkdownSyntaxError: If a step fails to consume any input.
        """
        source_len = self._source_len
        while self._pos < source_len:
            start = self._pos
            self._scan_block()
            if self._pos <= start:
                logger.debug("lexer stalled at offset %d (line %d)", start, self._lineno)
                raise MarkdownSyntaxError(
                    f"unable to tokenize input at offset {start}: {self._source[start:start + 20]!r}",
                    lineno=self._lineno,
                    source_file=self._source_file,
                )

        if self._tokens and not isinstance(self._tokens[-1], NewLineToken):
            self._emit(NewLineToken)

        return self._tokens

    # =========================================================================
    # Cursor helpers
    # =========================================================================

    def _find_line_end(self, start: int) -> int:
        """Position of the next newline at or after ``start``, or end of source."""
        idx = self._source.find("\n", start)
        return idx if idx != -1 else self._source_len

    def _advance_to(self, pos: int) -> None:
        """Move the cursor forward to ``pos``, keeping the line count current."""
        self._lineno += self._source.count("\n", self._pos, pos)
        self._pos = pos

    def _emit(self, token_type: type[Token], *args: object) -> None:
        """Create a token stamped with the current line number and append it."""
        self._tokens.append(token_type(*args, lineno=self._lineno))
