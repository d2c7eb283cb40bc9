"""Block scanner mixin."""

from __future__ import annotations

from marklet.tokens import NewLineToken, Token


class BlockScannerMixin:
    """Mixin providing the block-level dispatch.

    Recognizers are tried in a fixed priority order; the first one that
    matches emits its tokens and advances the cursor:

    1. ATX header
    2. Fenced code block
    3. Blockquote line
    4. Horizontal rule
    5. List item
    6. Setext header
    7. Blank line
    8. Inline line scan (fallback, always advances)

    """

    # These will be set by the Lexer class or other mixins
    _source: str
    _pos: int

    def _emit(self, token_type: type[Token], *args: object) -> None:
        """Create and append a token. Implemented by Lexer."""
        raise NotImplementedError

    def _advance_to(self, pos: int) -> None:
        """Move the cursor. Implemented by Lexer."""
        raise NotImplementedError

    # Classifier methods (provided by classifier mixins)
    def _try_atx_heading(self) -> bool:
        raise NotImplementedError

    def _try_fenced_code(self) -> bool:
        raise NotImplementedError

    def _try_block_quote(self) -> bool:
        raise NotImplementedError

    def _try_horizontal_rule(self) -> bool:
        raise NotImplementedError

    def _try_list_item(self) -> bool:
        raise NotImplementedError

    def _try_setext_heading(self) -> bool:
        raise NotImplementedError

    def _scan_line(self) -> None:
        raise NotImplementedError

    def _scan_block(self) -> None:
        """Lex one block construct starting at the cursor."""
        if (
            self._try_atx_heading()
            or self._try_fenced_code()
            or self._try_block_quote()
            or self._try_horizontal_rule()
            or self._try_list_item()
            or self._try_setext_heading()
            or self._try_blank_line()
        ):
            return
        self._scan_line()

    def _try_blank_line(self) -> bool:
        """Lex a bare newline at the cursor as a NewLineToken."""
        if not self._source.startswith("\n", self._pos):
            return False
        self._emit(NewLineToken)
        self._advance_to(self._pos + 1)
        return True
