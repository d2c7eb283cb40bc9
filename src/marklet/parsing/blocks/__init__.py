"""Block parsing subsystem for the marklet parser.

Architecture:
Block parsing is split into logical modules:
- core: Block dispatch and single-token blocks
- quote: Depth-mapped blockquote nesting
- list: Stack-based list nesting

"""

from marklet.parsing.blocks.core import BlockParsingCoreMixin
from marklet.parsing.blocks.list import ListParsingMixin
from marklet.parsing.blocks.quote import QuoteParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    QuoteParsingMixin,
    ListParsingMixin,
):
    """Combined block parsing mixin.

    Combines all block parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _pos: int
        - _current: Token | None

    Required Host Methods:
        - _advance() -> Token | None
        - _expect(token_type) -> Token
        - _fail(expected) -> NoReturn
        - _parse_inline_run(ends_at_rule) -> tuple[Inline, ...]

    """


__all__ = [
    "BlockParsingCoreMixin",
    "BlockParsingMixin",
    "ListParsingMixin",
    "QuoteParsingMixin",
]
