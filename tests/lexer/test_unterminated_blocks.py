"""Tests for unterminated constructs.

Nothing in the lexer requires a closing delimiter: an unterminated fence,
span or marker falls back to lower-priority recognizers or literal text,
and tokenization still terminates.
"""

import pytest

from marklet.lexer import Lexer
from marklet.tokens import (
    BlockQuoteToken,
    CodeBlockToken,
    ListItemToken,
    NewLineToken,
    TextToken,
)


class TestUnterminatedFence:
    """Unterminated code fences are not code."""

    def test_fence_then_text(self) -> None:
        tokens = Lexer("```\nline one\nline two").tokenize()
        assert not any(isinstance(t, CodeBlockToken) for t in tokens)
        assert TextToken("line one") in tokens
        assert TextToken("line two") in tokens

    def test_later_fence_still_closes(self) -> None:
        tokens = Lexer("```\na\n```\n```\nb").tokenize()
        assert tokens[0] == CodeBlockToken("", "a\n")
        assert sum(isinstance(t, CodeBlockToken) for t in tokens) == 1


@pytest.mark.parametrize(
    "source",
    [
        "**bold",
        "***both",
        "__under",
        "_it",
        "`code",
        "[text",
        "[text](",
        "![alt",
        "![alt](src",
    ],
)
def test_unterminated_spans_are_literal(source: str) -> None:
    assert Lexer(source).tokenize() == [TextToken(source), NewLineToken()]


class TestBareMarkers:
    """Markers with nothing after them."""

    def test_quote_marker(self) -> None:
        assert Lexer("> ").tokenize() == [BlockQuoteToken(1), NewLineToken()]

    def test_list_marker(self) -> None:
        assert Lexer("1. ").tokenize() == [ListItemToken(0, True, 1), NewLineToken()]

    def test_header_marker_then_more_lines(self) -> None:
        tokens = Lexer("#\n##\n").tokenize()
        assert tokens == [TextToken("#"), NewLineToken(), TextToken("##"), NewLineToken()]
