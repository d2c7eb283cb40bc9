"""Token navigation utilities for the marklet parser.

Provides the mixin for token stream traversal and the required-consume
checks that turn a token-kind mismatch into a MarkdownSyntaxError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn, TypeVar

from marklet.errors import MarkdownSyntaxError
from marklet.tokens import Token
from marklet.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)

T = TypeVar("T", bound=Token)


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _tokens_len: int (cached len(_tokens))
        - _pos: int
        - _current: Token | None
        - _source_file: str | None

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int
    _current: Token | None
    _source_file: str | None

    def _at_end(self) -> bool:
        """Check if at end of token stream."""
        return self._current is None

    def _advance(self) -> Token | None:
        """Advance to next token and return it."""
        self._pos += 1
        if self._pos < self._tokens_len:
            self._current = self._tokens[self._pos]
        else:
            self._current = None
        return self._current

    def _peek(self, offset: int = 1) -> Token | None:
        """Peek at token at offset from current position."""
        pos = self._pos + offset
        if pos < self._tokens_len:
            return self._tokens[pos]
        return None

    def _expect(self, token_type: type[T]) -> T:
        """Consume the current token, which must be a ``token_type``.

        Raises:
            MarkdownSyntaxError: If the current token has another kind or
                the stream is exhausted.
        """
        token = self._current
        if not isinstance(token, token_type):
            self._fail(token_type.__name__)
        self._advance()
        return token

    def _fail(self, expected: str) -> NoReturn:
        """Raise a MarkdownSyntaxError naming the expected and actual token."""
        token = self._current
        if token is None:
            found = "end of input"
            lineno = self._tokens[-1].lineno if self._tokens else None
        else:
            found = type(token).__name__
            lineno = getattr(token, "lineno", None)
        message = f"expected {expected}, found {found} (token {self._pos})"
        logger.debug("parse failed: %s", message)
        raise MarkdownSyntaxError(message, lineno=lineno or None, source_file=self._source_file)
