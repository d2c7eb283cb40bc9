"""Cursor-based lexer for marklet.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + cursor helpers)
├── charsets.py          # Marker characters and limits
├── classifiers/         # One block construct per mixin
│   ├── heading.py       # ATX and setext headers
│   ├── fence.py         # Fenced code blocks
│   ├── quote.py         # Blockquote lines
│   ├── thematic.py      # Horizontal rules
│   └── list.py          # List item markers
└── scanners/
    ├── block.py         # Priority dispatch over the classifiers
    └── line.py          # Inline spans within one line

Usage:
    >>> from marklet.lexer import Lexer
    >>> Lexer("text").tokenize()
    [TextToken(content='text', bold=False, italic=False), NewLineToken()]

"""

from marklet.lexer.core import Lexer

__all__ = ["Lexer"]
