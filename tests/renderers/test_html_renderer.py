"""Tests for HtmlRenderer.

Output is a compact fragment: no whitespace is inserted between tags.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from marklet.errors import RenderError
from marklet.nodes import (
    CodeBlock,
    CodeInline,
    Header,
    HorizontalRule,
    Image,
    Link,
    List,
    ListItem,
    Paragraph,
    Quote,
    QuoteItem,
    Root,
    Text,
)
from marklet.renderers import HtmlRenderer


def render(*blocks) -> str:
    return HtmlRenderer().render(Root(tuple(blocks)))


class TestBlocks:
    """One rule per block node."""

    def test_empty_document(self) -> None:
        assert render() == ""

    @pytest.mark.parametrize("level", range(1, 7))
    def test_header_levels(self, level: int) -> None:
        assert render(Header(level, (Text("t"),))) == f"<h{level}>t</h{level}>"

    def test_paragraph(self) -> None:
        assert render(Paragraph((Text("a"), Text(" "), Text("b")))) == "<p>a b</p>"

    def test_horizontal_rule(self) -> None:
        assert render(HorizontalRule()) == "<hr>"

    def test_code_block_body_verbatim(self) -> None:
        html = render(CodeBlock("html", "<b>&</b>\n"))
        assert html == '<pre><code class="html"><b>&</b>\n</code></pre>'

    def test_code_block_without_language(self) -> None:
        assert render(CodeBlock("", "x")) == '<pre><code class="">x</code></pre>'

    def test_image(self) -> None:
        assert render(Image("logo", "logo.png")) == '<img alt="logo" src="logo.png"/>'

    def test_image_attributes_escaped(self) -> None:
        html = render(Image('a "b"', "x?a=1&b=2"))
        assert html == '<img alt="a &quot;b&quot;" src="x?a=1&amp;b=2"/>'

    def test_blocks_concatenated(self) -> None:
        html = render(Header(1, (Text("T"),)), HorizontalRule(), Paragraph((Text("p"),)))
        assert html == "<h1>T</h1><hr><p>p</p>"


class TestQuotes:
    """Quote items become paragraphs; nested quotes nest in place."""

    def test_items_as_paragraphs(self) -> None:
        quote = Quote((QuoteItem((Text("line 1"),)), QuoteItem((Text("line 2"),))))
        assert render(quote) == "<blockquote><p>line 1</p><p>line 2</p></blockquote>"

    def test_nested_quote(self) -> None:
        quote = Quote(
            (
                QuoteItem((Text("a"),)),
                Quote((QuoteItem((Text("b"),)),)),
                QuoteItem((Text("c"),)),
            )
        )
        assert render(quote) == (
            "<blockquote><p>a</p><blockquote><p>b</p></blockquote><p>c</p></blockquote>"
        )


class TestLists:
    """Ordered and unordered lists with nesting inside the parent item."""

    def test_unordered(self) -> None:
        lst = List(False, (ListItem((Text("a"),)), ListItem((Text("b"),))))
        assert render(lst) == "<ul><li>a</li><li>b</li></ul>"

    def test_ordered(self) -> None:
        lst = List(True, (ListItem((Text("a"),)),))
        assert render(lst) == "<ol><li>a</li></ol>"

    def test_nested_inside_item(self) -> None:
        inner = List(True, (ListItem((Text("b"),)),))
        lst = List(False, (ListItem((Text("a"), inner)), ListItem((Text("c"),))))
        assert render(lst) == "<ul><li>a<ol><li>b</li></ol></li><li>c</li></ul>"

    def test_empty_item(self) -> None:
        assert render(List(False, (ListItem(()),))) == "<ul><li></li></ul>"


class TestInlines:
    """Text emphasis, inline code and links."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            (Text("x"), "x"),
            (Text("x", bold=True), "<b>x</b>"),
            (Text("x", italic=True), "<i>x</i>"),
            (Text("x", bold=True, italic=True), "<i><b>x</b></i>"),
        ],
    )
    def test_emphasis_wrapping(self, text: Text, expected: str) -> None:
        assert render(Paragraph((text,))) == f"<p>{expected}</p>"

    def test_text_escaped(self) -> None:
        assert render(Paragraph((Text('a < b & "c"'),))) == "<p>a &lt; b &amp; &quot;c&quot;</p>"

    def test_single_quote_untouched(self) -> None:
        assert render(Paragraph((Text("it's"),))) == "<p>it's</p>"

    def test_inline_code_body_verbatim(self) -> None:
        html = render(Paragraph((CodeInline("py", "x<y"),)))
        assert html == '<p><code class="py">x<y</code></p>'

    def test_link(self) -> None:
        html = render(Paragraph((Link("a & b", "http://x?a=1&b=2"),)))
        assert html == '<p><a href="http://x?a=1&amp;b=2">a &amp; b</a></p>'

    @given(st.text())
    def test_text_never_leaks_markup(self, content: str) -> None:
        html = render(Paragraph((Text(content),)))
        inner = html.removeprefix("<p>").removesuffix("</p>")
        assert "<" not in inner
        assert ">" not in inner
        assert '"' not in inner


class TestUnknownNodes:
    """Hand-built trees with foreign objects raise RenderError."""

    def test_foreign_block(self) -> None:
        with pytest.raises(RenderError, match="str"):
            render("not a node")

    def test_foreign_inline(self) -> None:
        with pytest.raises(RenderError, match="int"):
            render(Paragraph((42,)))

    def test_foreign_quote_child(self) -> None:
        with pytest.raises(RenderError):
            render(Quote((Text("x"),)))

    def test_foreign_list_child(self) -> None:
        with pytest.raises(RenderError, match="Text"):
            render(List(False, (Text("x"),)))
