"""Marker characters and limits recognized by the lexer.

Sets are frozensets for O(1) membership tests and are shared, immutable,
module-level constants.
"""

from __future__ import annotations

import string

# ATX headers: "#" through "######" followed by a space
HEADER_MARKER = "#"
MAX_HEADER_LEVEL = 6

# Fenced code blocks open and close with exactly this run
CODE_FENCE = "```"

# Trailing characters stripped from a fence's language tag
FENCE_INFO_WHITESPACE = " \t\r\f\v"

QUOTE_MARKER = ">"

# Horizontal rules: three or more of one of these, spaces allowed after
RULE_CHARS: frozenset[str] = frozenset("*-")
MIN_RULE_LENGTH = 3

UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("*-")
ORDERED_LIST_DIGITS: frozenset[str] = frozenset(string.digits)
ORDERED_LIST_DELIMITER = "."

# Setext underline character -> header level
SETEXT_LEVELS: dict[str, int] = {"=": 1, "-": 2}

# Emphasis: marker repeated 3 (bold italic), 2 (bold) or 1 (italic) times.
# Wider delimiters are tried first.
EMPHASIS_MARKERS: frozenset[str] = frozenset("*_")
EMPHASIS_WIDTHS: tuple[int, ...] = (3, 2, 1)

CODE_SPAN_MARKER = "`"
CODE_LANG_CHARS: frozenset[str] = frozenset(string.ascii_lowercase)

IMAGE_MARKER = "!"
LINK_OPEN = "["
LINK_TARGET_OPEN = "]("
LINK_TARGET_CLOSE = ")"
