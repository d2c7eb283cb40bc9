"""List item classifier mixin."""

from __future__ import annotations

from marklet.lexer.charsets import (
    ORDERED_LIST_DELIMITER,
    ORDERED_LIST_DIGITS,
    UNORDERED_LIST_MARKERS,
)
from marklet.tokens import ListItemToken, Token


class ListClassifierMixin:
    """Mixin providing list item recognition.

    Only single-digit ordered markers are recognized (``1.`` to ``9.`` and
    ``0.``); ``10.`` lexes as text.
    """

    _source: str
    _source_len: int
    _pos: int
    _list_indent_size: int

    def _emit(self, token_type: type[Token], *args: object) -> None:
        """Create and append a token. Implemented by Lexer."""
        raise NotImplementedError

    def _advance_to(self, pos: int) -> None:
        """Move the cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_line(self) -> None:
        """Scan inline content to end of line. Implemented by LineScannerMixin."""
        raise NotImplementedError

    def _try_list_item(self) -> bool:
        """Try to lex a list item marker.

        Leading spaces set the indent level (``spaces // list_indent_size``).
        The marker is ``*`` or ``-`` (unordered) or a digit followed by ``.``
        (ordered), and must be followed by a space.

        Returns:
            True if a list item was emitted.
        """
        source = self._source
        source_len = self._source_len
        marker = self._pos
        while marker < source_len and source[marker] == " ":
            marker += 1
        if marker >= source_len:
            return False

        spaces = marker - self._pos
        indent = spaces // self._list_indent_size
        char = source[marker]

        if char in UNORDERED_LIST_MARKERS:
            if not source.startswith(" ", marker + 1):
                return False
            self._emit(ListItemToken, indent, False, None)
            self._advance_to(marker + 2)
        elif char in ORDERED_LIST_DIGITS:
            if not source.startswith(ORDERED_LIST_DELIMITER + " ", marker + 1):
                return False
            self._emit(ListItemToken, indent, True, int(char))
            self._advance_to(marker + 3)
        else:
            return False

        self._scan_line()
        return True
