"""Inline line scanner mixin.

Splits the current line into inline tokens. At each position the span
matchers are tried against the character under the cursor; characters no
matcher claims accumulate into a literal text run, which is flushed as a
plain TextToken before the next match and at the end of the line.

Span priority (only one family can start at a given character):
    ``***x***`` / ``___x___``   bold + italic
    ``**x**`` / ``__x__``       bold
    ``*x*`` / ``_x_``           italic
    ``![alt](src)``             image
    ``[text](href)``            link
    `` `code`lang ``            inline code

Unterminated spans never fail; their opening characters become literal text.
"""

from __future__ import annotations

from marklet.lexer.charsets import (
    CODE_LANG_CHARS,
    CODE_SPAN_MARKER,
    EMPHASIS_MARKERS,
    EMPHASIS_WIDTHS,
    IMAGE_MARKER,
    LINK_OPEN,
    LINK_TARGET_CLOSE,
    LINK_TARGET_OPEN,
)
from marklet.tokens import (
    CodeInlineToken,
    ImageToken,
    LinkToken,
    NewLineToken,
    TextToken,
    Token,
)

# Every emphasis marker is dropped from emphasized content
_DROP_MARKERS = str.maketrans("", "", "".join(sorted(EMPHASIS_MARKERS)))


class LineScannerMixin:
    """Mixin providing inline scanning of a single line."""

    _source: str
    _source_len: int
    _pos: int
    _lineno: int
    _tokens: list[Token]

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
        """Lex the rest of the current line, including its newline if any."""
        source = self._source
        line_end = self._find_line_end(self._pos)
        pos = self._pos
        run_start = pos

        while pos < line_end:
            char = source[pos]
            if char in EMPHASIS_MARKERS:
                match = self._match_emphasis(pos, line_end)
            elif char == IMAGE_MARKER and source.startswith(LINK_OPEN, pos + 1):
                match = self._match_image(pos, line_end)
            elif char == LINK_OPEN:
                match = self._match_link(pos, line_end)
            elif char == CODE_SPAN_MARKER:
                match = self._match_code_span(pos, line_end)
            else:
                match = None

            if match is None:
                pos += 1
                continue

            token, end = match
            self._flush_text(run_start, pos)
            self._tokens.append(token)
            pos = run_start = end

        self._flush_text(run_start, line_end)
        if line_end < self._source_len:
            self._emit(NewLineToken)
            line_end += 1
        self._advance_to(line_end)

    def _flush_text(self, start: int, end: int) -> None:
        """Emit the pending literal run ``source[start:end]``, if non-empty."""
        if end > start:
            self._emit(TextToken, self._source[start:end])

    # =========================================================================
    # Span matchers: return (token, end) on success, None otherwise
    # =========================================================================

    def _match_emphasis(self, pos: int, line_end: int) -> tuple[Token, int] | None:
        """Match ``***x***``, ``**x**`` or ``*x*`` (or the ``_`` forms) at pos.

        ``x`` must be non-empty and must not contain the delimiter character.
        Widths are tried widest first. Any ``*`` or ``_`` left inside ``x`` is
        removed from the token content (``*snake_case*`` gives ``snakecase``).
        """
        source = self._source
        marker = source[pos]
        for width in EMPHASIS_WIDTHS:
            delimiter = marker * width
            if not source.startswith(delimiter, pos):
                continue
            content_start = pos + width
            close = source.find(marker, content_start, line_end)
            if close <= content_start:
                continue
            if close + width > line_end or not source.startswith(delimiter, close):
                continue
            token = TextToken(
                source[content_start:close].translate(_DROP_MARKERS),
                bold=width >= 2,
                italic=width != 2,
                lineno=self._lineno,
            )
            return token, close + width
        return None

    def _split_label_target(self, label_start: int, line_end: int) -> tuple[str, str, int] | None:
        """Split ``label](target)`` starting at label_start.

        Both parts are greedy within the line: the target ends at the last
        ``)`` and the label at the last ``](`` before it, so
        ``[a](b) and (c)`` has the target ``b) and (c``. Both may be empty.

        Returns:
            (label, target, end) or None when either delimiter is missing.
        """
        source = self._source
        target_end = source.rfind(LINK_TARGET_CLOSE, label_start, line_end)
        if target_end == -1:
            return None
        label_end = source.rfind(LINK_TARGET_OPEN, label_start, target_end)
        if label_end == -1:
            return None
        target_start = label_end + len(LINK_TARGET_OPEN)
        return (
            source[label_start:label_end],
            source[target_start:target_end],
            target_end + len(LINK_TARGET_CLOSE),
        )

    def _match_image(self, pos: int, line_end: int) -> tuple[Token, int] | None:
        """Match ``![alt](src)`` at pos."""
        parts = self._split_label_target(pos + len(IMAGE_MARKER) + len(LINK_OPEN), line_end)
        if parts is None:
            return None
        alt, src, end = parts
        return ImageToken(alt, src, lineno=self._lineno), end

    def _match_link(self, pos: int, line_end: int) -> tuple[Token, int] | None:
        """Match ``[text](href)`` at pos."""
        parts = self._split_label_target(pos + len(LINK_OPEN), line_end)
        if parts is None:
            return None
        text, href, end = parts
        return LinkToken(text, href, lineno=self._lineno), end

    def _match_code_span(self, pos: int, line_end: int) -> tuple[Token, int] | None:
        """Match `` `code` `` at pos, with an optional lowercase language suffix.

        ``code`` is at least one character long.
        """
        source = self._source
        close = source.find(CODE_SPAN_MARKER, pos + 2, line_end)
        if close == -1:
            return None
        lang_end = close + 1
        while lang_end < line_end and source[lang_end] in CODE_LANG_CHARS:
            lang_end += 1
        token = CodeInlineToken(
            source[close + 1 : lang_end],
            source[pos + 1 : close],
            lineno=self._lineno,
        )
        return token, lang_end
