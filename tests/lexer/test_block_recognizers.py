"""Tests for the lexer's block-level recognizers.

Each block construct is recognized at a line start, in a fixed priority
order; lines no recognizer claims fall through to inline scanning.
"""

from marklet.config import CompileConfig, compile_config_context
from marklet.lexer import Lexer
from marklet.tokens import (
    BlockQuoteToken,
    CodeBlockToken,
    CodeInlineToken,
    HeaderToken,
    HorizontalRuleToken,
    ListItemToken,
    NewLineToken,
    TextToken,
)


def tokenize(source: str) -> list:
    return Lexer(source).tokenize()


class TestAtxHeaders:
    """ATX headers: one to six '#' followed by a space."""

    def test_header_at_end_of_input(self) -> None:
        assert tokenize("# header") == [
            HeaderToken(1),
            TextToken("header"),
            HorizontalRuleToken(),
            NewLineToken(),
        ]

    def test_header_followed_by_line(self) -> None:
        assert tokenize("## Two\nbody") == [
            HeaderToken(2),
            TextToken("Two"),
            NewLineToken(),
            HorizontalRuleToken(),
            NewLineToken(),
            TextToken("body"),
            NewLineToken(),
        ]

    def test_all_levels(self) -> None:
        for level in range(1, 7):
            tokens = tokenize("#" * level + " title")
            assert tokens[0] == HeaderToken(level)

    def test_seven_markers_is_text(self) -> None:
        assert tokenize("####### seven") == [TextToken("####### seven"), NewLineToken()]

    def test_marker_without_space_is_text(self) -> None:
        assert tokenize("#nospace") == [TextToken("#nospace"), NewLineToken()]

    def test_header_content_is_scanned_inline(self) -> None:
        assert tokenize("# a **b**")[:3] == [
            HeaderToken(1),
            TextToken("a "),
            TextToken("b", bold=True),
        ]

    def test_empty_header(self) -> None:
        assert tokenize("# ") == [HeaderToken(1), HorizontalRuleToken(), NewLineToken()]


class TestFencedCode:
    """Fenced code blocks."""

    def test_with_language(self) -> None:
        assert tokenize("```python\nprint(1)\n```") == [
            CodeBlockToken("python", "print(1)\n"),
            NewLineToken(),
        ]

    def test_without_language(self) -> None:
        assert tokenize("```\ncode\n```")[0] == CodeBlockToken("", "code\n")

    def test_language_trailing_whitespace_stripped(self) -> None:
        assert tokenize("```js  \nx\n```")[0] == CodeBlockToken("js", "x\n")

    def test_body_is_verbatim(self) -> None:
        source = "```\n# not a header\n> not a quote\n**not bold**\n```"
        assert tokenize(source)[0] == CodeBlockToken(
            "", "# not a header\n> not a quote\n**not bold**\n"
        )

    def test_closing_fence_may_be_mid_line(self) -> None:
        assert tokenize("```\nabc```")[0] == CodeBlockToken("", "abc")

    def test_content_after_block(self) -> None:
        assert tokenize("```\ncode\n```\nafter") == [
            CodeBlockToken("", "code\n"),
            NewLineToken(),
            NewLineToken(),
            TextToken("after"),
            NewLineToken(),
        ]

    def test_unterminated_fence_is_not_code(self) -> None:
        tokens = tokenize("```py\ncode")
        assert not any(isinstance(t, CodeBlockToken) for t in tokens)
        assert tokens == [
            CodeInlineToken("py", "`"),
            NewLineToken(),
            TextToken("code"),
            NewLineToken(),
        ]

    def test_fence_without_newline_is_not_code(self) -> None:
        tokens = tokenize("```")
        assert not any(isinstance(t, CodeBlockToken) for t in tokens)


class TestBlockQuotes:
    """Blockquote line markers."""

    def test_single_depth(self) -> None:
        assert tokenize("> hi") == [BlockQuoteToken(1), TextToken("hi"), NewLineToken()]

    def test_nested_depth(self) -> None:
        assert tokenize("> > deep")[:2] == [BlockQuoteToken(2), TextToken("deep")]

    def test_three_levels(self) -> None:
        assert tokenize("> > > x")[0] == BlockQuoteToken(3)

    def test_adjacent_markers_are_depth_one(self) -> None:
        assert tokenize(">> x")[:2] == [BlockQuoteToken(1), TextToken("> x")]

    def test_marker_alone(self) -> None:
        assert tokenize(">") == [BlockQuoteToken(1), NewLineToken()]

    def test_marker_alone_between_lines(self) -> None:
        assert tokenize("> a\n>\n> b") == [
            BlockQuoteToken(1),
            TextToken("a"),
            NewLineToken(),
            BlockQuoteToken(1),
            NewLineToken(),
            BlockQuoteToken(1),
            TextToken("b"),
            NewLineToken(),
        ]

    def test_space_after_marker_is_optional(self) -> None:
        assert tokenize(">tight")[:2] == [BlockQuoteToken(1), TextToken("tight")]


class TestHorizontalRules:
    """Horizontal rules."""

    def test_stars(self) -> None:
        assert tokenize("***") == [HorizontalRuleToken(), NewLineToken()]

    def test_dashes(self) -> None:
        assert tokenize("---") == [HorizontalRuleToken(), NewLineToken()]

    def test_long_rule_with_trailing_spaces(self) -> None:
        assert tokenize("------  ") == [HorizontalRuleToken(), NewLineToken()]

    def test_spaces_after_first_three(self) -> None:
        assert tokenize("--- -") == [HorizontalRuleToken(), NewLineToken()]

    def test_consumes_its_newline(self) -> None:
        assert tokenize("***\ntext") == [
            HorizontalRuleToken(),
            NewLineToken(),
            TextToken("text"),
            NewLineToken(),
        ]

    def test_mixed_characters_are_not_a_rule(self) -> None:
        assert HorizontalRuleToken() not in tokenize("**-")

    def test_rule_needs_three_markers(self) -> None:
        assert tokenize("***x") == [TextToken("***x"), NewLineToken()]

    def test_spaced_dashes_are_a_list_item(self) -> None:
        assert tokenize("- - -") == [
            ListItemToken(0, False, None),
            TextToken("- -"),
            NewLineToken(),
        ]


class TestListItems:
    """List item markers."""

    def test_unordered_dash(self) -> None:
        assert tokenize("- item") == [
            ListItemToken(0, False, None),
            TextToken("item"),
            NewLineToken(),
        ]

    def test_unordered_star(self) -> None:
        assert tokenize("* item")[0] == ListItemToken(0, False, None)

    def test_ordered(self) -> None:
        assert tokenize("1. one")[:2] == [ListItemToken(0, True, 1), TextToken("one")]

    def test_ordered_keeps_digit(self) -> None:
        assert tokenize("7. seven")[0].digit == 7

    def test_indent_in_units_of_two(self) -> None:
        assert tokenize("  - nested")[0] == ListItemToken(1, False, None)
        assert tokenize("   - odd")[0] == ListItemToken(1, False, None)
        assert tokenize("    - deeper")[0] == ListItemToken(2, False, None)

    def test_indent_size_from_config(self) -> None:
        with compile_config_context(CompileConfig(list_indent_size=4)):
            assert Lexer("    - x").tokenize()[0] == ListItemToken(1, False, None)
            assert Lexer("  - x").tokenize()[0] == ListItemToken(0, False, None)

    def test_two_digit_marker_is_text(self) -> None:
        assert tokenize("10. ten") == [TextToken("10. ten"), NewLineToken()]

    def test_marker_without_space_is_text(self) -> None:
        assert tokenize("-item") == [TextToken("-item"), NewLineToken()]

    def test_empty_item(self) -> None:
        assert tokenize("- ") == [ListItemToken(0, False, None), NewLineToken()]


class TestSetextHeaders:
    """Setext headers: a text line underlined with '=' or '-'."""

    def test_level_one(self) -> None:
        assert tokenize("Title\n===") == [
            HeaderToken(1),
            TextToken("Title"),
            NewLineToken(),
            HorizontalRuleToken(),
            NewLineToken(),
        ]

    def test_level_two(self) -> None:
        assert tokenize("Sub\n---")[:2] == [HeaderToken(2), TextToken("Sub")]

    def test_underline_newline_becomes_blank_line(self) -> None:
        assert tokenize("Title\n===\nbody") == [
            HeaderToken(1),
            TextToken("Title"),
            NewLineToken(),
            HorizontalRuleToken(),
            NewLineToken(),
            NewLineToken(),
            TextToken("body"),
            NewLineToken(),
        ]

    def test_trailing_spaces_allowed(self) -> None:
        assert tokenize("Title\n===  ")[0] == HeaderToken(1)

    def test_mixed_underline_is_not_setext(self) -> None:
        assert tokenize("Title\n=-=") == [
            TextToken("Title"),
            NewLineToken(),
            TextToken("=-="),
            NewLineToken(),
        ]

    def test_single_character_underline(self) -> None:
        assert tokenize("Title\n=")[0] == HeaderToken(1)


class TestBlankLines:
    """Blank lines."""

    def test_blank_line_between_paragraphs(self) -> None:
        assert tokenize("a\n\nb") == [
            TextToken("a"),
            NewLineToken(),
            NewLineToken(),
            TextToken("b"),
            NewLineToken(),
        ]

    def test_only_newlines(self) -> None:
        assert tokenize("\n\n") == [NewLineToken(), NewLineToken()]

    def test_empty_source(self) -> None:
        assert tokenize("") == []
