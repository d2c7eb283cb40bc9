"""Blockquote classifier mixin."""

from __future__ import annotations

from marklet.lexer.charsets import QUOTE_MARKER
from marklet.tokens import BlockQuoteToken, Token


class QuoteClassifierMixin:
    """Mixin providing blockquote line recognition."""

    _source: str
    _pos: int

    def _emit(self, token_type: type[Token], *args: object) -> None:
        """Create and append a token. Implemented by Lexer."""
        raise NotImplementedError

    def _advance_to(self, pos: int) -> None:
        """Move the cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_line(self) -> None:
        """Scan inline content to end of line. Implemented by LineScannerMixin."""
        raise NotImplementedError

    def _try_block_quote(self) -> bool:
        """Try to lex a blockquote line marker.

        The marker is ``>`` followed by any number of `` >`` and an optional
        space, so ``>``, ``> text`` and ``> > > text`` all qualify. Depth is the
        number of ``>`` characters. ``>>`` is depth 1 followed by the text
        ``>``. The rest of the line is scanned as inline content.

        Returns:
            True if a quote marker was emitted.
        """
        source = self._source
        pos = self._pos
        if not source.startswith(QUOTE_MARKER, pos):
            return False

        depth = 1
        end = pos + 1
        nested_marker = " " + QUOTE_MARKER
        while source.startswith(nested_marker, end):
            depth += 1
            end += len(nested_marker)
        if source.startswith(" ", end):
            end += 1

        self._emit(BlockQuoteToken, depth)
        self._advance_to(end)
        self._scan_line()
        return True
