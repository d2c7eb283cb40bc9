"""Fenced code block classifier mixin."""

from __future__ import annotations

from marklet.lexer.charsets import CODE_FENCE, FENCE_INFO_WHITESPACE
from marklet.tokens import CodeBlockToken, NewLineToken, Token
from marklet.utils.logger import get_logger

logger = get_logger(__name__)


class FenceClassifierMixin:
    """Mixin providing fenced code block recognition."""

    _source: str
    _pos: int
    _lineno: int

    def _emit(self, token_type: type[Token], *args: object) -> None:
        """Create and append a token. Implemented by Lexer."""
        raise NotImplementedError

    def _advance_to(self, pos: int) -> None:
        """Move the cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _try_fenced_code(self) -> bool:
        """Try to lex a fenced code block.

        The opening line is the fence plus an optional language tag (trailing
        whitespace stripped). The body starts after the opening line's newline
        and runs up to the next fence, which may sit anywhere, not only at a
        line start. Nothing is consumed unless the closing fence exists: an
        unterminated fence falls through to the lower-priority recognizers.

        Returns:
            True if a code block was emitted.
        """
        source = self._source
        pos = self._pos
        if not source.startswith(CODE_FENCE, pos):
            return False

        info_end = source.find("\n", pos)
        if info_end == -1:
            return False

        close = source.find(CODE_FENCE, info_end + 1)
        if close == -1:
            logger.debug("unterminated code fence on line %d, lexing as text", self._lineno)
            return False

        lang = source[pos + len(CODE_FENCE) : info_end].rstrip(FENCE_INFO_WHITESPACE)
        self._emit(CodeBlockToken, lang, source[info_end + 1 : close])
        self._emit(NewLineToken)
        self._advance_to(close + len(CODE_FENCE))
        return True
