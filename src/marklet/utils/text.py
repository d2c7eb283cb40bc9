"""Text escaping for HTML output.

Example:
    >>> from marklet.utils.text import escape_html
    >>> escape_html('<a href="x">')
    '&lt;a href=&quot;x&quot;&gt;'
"""

from __future__ import annotations

import html


def escape_html(text: str) -> str:
    """Escape the four HTML-significant characters.

    Converts ``&``, ``<``, ``>`` and ``"`` to entities and leaves everything
    else, single quotes included, untouched. Used for text content and for
    every attribute value; code bodies are never passed through it.

    Args:
        text: Raw text

    Returns:
        Escaped text (each character replaced at most once)
    """
    return html.escape(text, quote=False).replace('"', "&quot;")
