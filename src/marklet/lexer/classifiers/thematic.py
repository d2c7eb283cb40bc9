"""Horizontal rule classifier mixin."""

from __future__ import annotations

from marklet.lexer.charsets import MIN_RULE_LENGTH, RULE_CHARS
from marklet.tokens import HorizontalRuleToken, NewLineToken, Token


class ThematicClassifierMixin:
    """Mixin providing horizontal rule recognition."""

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

    def _try_horizontal_rule(self) -> bool:
        """Try to lex a horizontal rule line.

        The line must open with three consecutive ``*`` or ``-`` and contain
        nothing but that character and spaces afterwards (``***``, ``--- -``).
        ``* * *`` is not a rule; it lexes as a list item.

        Returns:
            True if a rule was emitted.
        """
        line_end = self._find_line_end(self._pos)
        line = self._source[self._pos : line_end]
        if len(line) < MIN_RULE_LENGTH:
            return False

        char = line[0]
        if char not in RULE_CHARS or not line.startswith(char * MIN_RULE_LENGTH):
            return False
        if line[MIN_RULE_LENGTH:].strip(char + " "):
            return False

        self._emit(HorizontalRuleToken)
        self._emit(NewLineToken)
        # Consume the rule's own newline
        self._advance_to(min(line_end + 1, self._source_len))
        return True
