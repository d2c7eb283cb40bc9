"""Parsing subsystem for the marklet parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token stream traversal and required-consume checks
- `InlineParsingMixin`: Inline runs (text, code spans, links)
- `BlockParsingMixin`: Block-level content (headers, quotes, lists, ...)

Example:
    >>> from marklet.parsing import (
    ...     TokenNavigationMixin,
    ...     InlineParsingMixin,
    ...     BlockParsingMixin,
    ... )
    >>> class Parser(TokenNavigationMixin, InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from marklet.parsing.blocks import BlockParsingMixin
from marklet.parsing.inline import InlineParsingMixin
from marklet.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "InlineParsingMixin",
    "BlockParsingMixin",
]
