"""marklet renderers.

Renderers convert typed tree nodes into output formats.

Available Renderers:
- HtmlRenderer: Renders the tree to an HTML fragment using StringBuilder

"""

from marklet.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer"]
