"""Header classifier mixin (ATX and setext)."""

from __future__ import annotations

from marklet.lexer.charsets import HEADER_MARKER, MAX_HEADER_LEVEL, SETEXT_LEVELS
from marklet.tokens import HeaderToken, HorizontalRuleToken, NewLineToken, Token


class HeadingClassifierMixin:
    """Mixin providing ATX and setext header recognition.

    Both forms emit a HeaderToken, the header's inline tokens, and then a
    HorizontalRuleToken + NewLineToken pair: every header is followed by a
    rule in the document model.
    """

    _source: str
    _source_len: int
    _pos: int

    def _emit(self, token_type: type[Token], *args: object) -> None:
        """Create and append a token. Implemented by Lexer."""
        raise NotImplementedError

    def _advance_to(self, pos: int) -> None:
        """Move the cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _find_line_end(self, start: int) -> int:
        """Find end of line. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_line(self) -> None:
        """Scan inline content to end of line. Implemented by LineScannerMixin."""
        raise NotImplementedError

    def _try_atx_heading(self) -> bool:
        """Try to lex an ATX header (``#`` to ``######`` followed by a space).

        Seven or more ``#`` never form a header. The rest of the line is
        scanned as inline content.

        Returns:
            True if a header was emitted.
        """
        source = self._source
        pos = self._pos
        level = 0
        while level <= MAX_HEADER_LEVEL and source.startswith(HEADER_MARKER, pos + level):
            level += 1

        if not 1 <= level <= MAX_HEADER_LEVEL or not source.startswith(" ", pos + level):
            return False

        self._emit(HeaderToken, level)
        self._advance_to(pos + level + 1)
        self._scan_line()
        self._emit(HorizontalRuleToken)
        self._emit(NewLineToken)
        return True

    def _try_setext_heading(self) -> bool:
        """Try to lex a setext header: a text line underlined by ``=`` or ``-``.

        The underline must consist of one repeated character, optionally
        followed by spaces. Its content is discarded; its newline stays in
        the input and is later lexed as a blank line.

        Returns:
            True if a header was emitted.
        """
        source = self._source
        text_end = source.find("\n", self._pos)
        if text_end == -1 or text_end == self._pos:
            return False

        underline_start = text_end + 1
        underline_end = self._find_line_end(underline_start)
        underline = source[underline_start:underline_end].rstrip(" ")
        if not underline:
            return False

        level = SETEXT_LEVELS.get(underline[0])
        if level is None or underline.strip(underline[0]):
            return False

        self._emit(HeaderToken, level)
        self._scan_line()
        self._advance_to(underline_end)
        self._emit(HorizontalRuleToken)
        self._emit(NewLineToken)
        return True
