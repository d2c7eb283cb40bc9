"""Standalone preview page around a compiled fragment.

``compile()`` produces an HTML fragment meant to be embedded by a host.
This module is the host side for the simple case: a complete document with
a title and the preview stylesheet.

Usage:
    >>> from marklet.page import wrap_page
    >>> page = wrap_page("<p>hi</p>", title="Notes")

"""

from __future__ import annotations

from marklet.utils.text import escape_html

DEFAULT_TITLE = "Markdown Preview"

PREVIEW_STYLESHEET = """\
body { font-family: Arial, sans-serif; margin: 40px; }
blockquote { color: gray; border-left: 4px solid #ccc; padding-left: 10px; }
strong { font-weight: bold; }"""

_PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
{stylesheet}
</style>
</head>
<body>
{body}
</body>
</html>
"""


def wrap_page(fragment: str, *, title: str = DEFAULT_TITLE) -> str:
    """Wrap an HTML fragment in a complete preview document.

    The title is escaped; the fragment is inserted verbatim.

    Args:
        fragment: HTML produced by ``compile()``
        title: Document title

    Returns:
        Complete HTML document, ending with a newline
    """
    return _PAGE_TEMPLATE.format(
        title=escape_html(title),
        stylesheet=PREVIEW_STYLESHEET,
        body=fragment,
    )


__all__ = ["DEFAULT_TITLE", "PREVIEW_STYLESHEET", "wrap_page"]
