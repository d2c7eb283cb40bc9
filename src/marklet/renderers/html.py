"""HTML renderer using StringBuilder pattern.

Renders the typed tree to a compact HTML fragment (no whitespace between
tags) in a single pass.

Thread Safety:
The renderer holds no per-render state. Each render() call uses its own
StringBuilder, so a single HtmlRenderer instance can be shared across
threads.
"""

import logging
from typing import NoReturn

from marklet.errors import RenderError
from marklet.nodes import (
    Block,
    CodeBlock,
    CodeInline,
    Header,
    HorizontalRule,
    Image,
    Inline,
    Link,
    List,
    ListItem,
    Paragraph,
    Quote,
    QuoteItem,
    Root,
    Text,
)
from marklet.stringbuilder import StringBuilder
from marklet.utils.text import escape_html

logger = logging.getLogger(__name__)


class HtmlRenderer:
    """Render a document tree to HTML.

    Text and every attribute value (alt, src, href, lang) are escaped; code
    bodies are emitted verbatim so authors can embed markup in them.

    Usage:
        >>> from marklet.nodes import Paragraph, Root, Text
        >>> HtmlRenderer().render(Root((Paragraph((Text("text"),)),)))
        '<p>text</p>'

    Thread Safety:
        Stateless; safe to share between threads.
    """

    __slots__ = ()

    def render(self, node: Root) -> str:
        """Render document tree to an HTML string.

        Args:
            node: Document root

        Returns:
            HTML fragment

        Raises:
            RenderError: If the tree holds a node this renderer has no rule for.
        """
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb)
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder) -> None:
        """Render a block node."""
        match block:
            case Header(level=level, children=children):
                sb.append(f"<h{level}>")
                self._render_inlines(children, sb)
                sb.append(f"</h{level}>")
            case Paragraph(children=children):
                sb.append("<p>")
                self._render_inlines(children, sb)
                sb.append("</p>")
            case CodeBlock(lang=lang, code=code):
                sb.append(f'<pre><code class="{escape_html(lang)}">')
                sb.append(code)
                sb.append("</code></pre>")
            case Quote():
                self._render_quote(block, sb)
            case List():
                self._render_list(block, sb)
            case HorizontalRule():
                sb.append("<hr>")
            case Image(alt=alt, src=src):
                sb.append(f'<img alt="{escape_html(alt)}" src="{escape_html(src)}"/>')
            case _:
                self._unknown(block)

    def _render_quote(self, quote: Quote, sb: StringBuilder) -> None:
        """Render a blockquote; deeper quotes nest in place."""
        sb.append("<blockquote>")
        for child in quote.children:
            match child:
                case Quote():
                    self._render_quote(child, sb)
                case QuoteItem(children=children):
                    sb.append("<p>")
                    self._render_inlines(children, sb)
                    sb.append("</p>")
                case _:
                    self._unknown(child)
        sb.append("</blockquote>")

    def _render_list(self, lst: List, sb: StringBuilder) -> None:
        """Render ordered or unordered list.

        A nested list is rendered inside its parent item's ``<li>``, after
        the item's inline content.
        """
        sb.append("<ol>" if lst.ordered else "<ul>")
        for item in lst.children:
            if not isinstance(item, ListItem):
                self._unknown(item)
            sb.append("<li>")
            for child in item.children:
                if isinstance(child, List):
                    self._render_list(child, sb)
                else:
                    self._render_inline(child, sb)
            sb.append("</li>")
        sb.append("</ol>" if lst.ordered else "</ul>")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(self, inlines: tuple[Inline, ...], sb: StringBuilder) -> None:
        for inline in inlines:
            self._render_inline(inline, sb)

    def _render_inline(self, inline: Inline, sb: StringBuilder) -> None:
        """Render an inline node."""
        match inline:
            case Text(content=content, bold=bold, italic=italic):
                if italic:
                    sb.append("<i>")
                if bold:
                    sb.append("<b>")
                sb.append(escape_html(content))
                if bold:
                    sb.append("</b>")
                if italic:
                    sb.append("</i>")
            case CodeInline(lang=lang, code=code):
                sb.append(f'<code class="{escape_html(lang)}">')
                sb.append(code)
                sb.append("</code>")
            case Link(text=text, href=href):
                sb.append(f'<a href="{escape_html(href)}">{escape_html(text)}</a>')
            case _:
                self._unknown(inline)

    def _unknown(self, node: object) -> NoReturn:
        logger.debug("no HTML rule for %r", node)
        raise RenderError(f"cannot render node of type {type(node).__name__}")
