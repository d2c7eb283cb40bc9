"""List parsing for the marklet parser.

Nesting is tracked with an explicit stack of (open list, depth) pairs. Item
depths are measured relative to the list's first item, and a list deepens
by at most one level per item however far the source indents it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from marklet.nodes import Inline, List, ListItem
from marklet.tokens import ListItemToken
from marklet.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class _OpenItem:
    """A ListItem whose nested list may still grow."""

    children: list[Inline | _OpenList] = field(default_factory=list)

    def freeze(self) -> ListItem:
        return ListItem(
            tuple(
                child.freeze() if isinstance(child, _OpenList) else child
                for child in self.children
            )
        )


@dataclass(slots=True)
class _OpenList:
    """A List still receiving items."""

    ordered: bool
    items: list[_OpenItem] = field(default_factory=list)

    def freeze(self) -> List:
        return List(self.ordered, tuple(item.freeze() for item in self.items))


class ListParsingMixin:
    """Mixin providing list parsing.

    Required Host Attributes:
        - _current: Token | None

    Required Host Methods:
        - _advance() -> Token | None
        - _expect(token_type) -> Token
        - _fail(expected) -> NoReturn
        - _parse_inline_run() -> tuple[Inline, ...]

    """

    def _parse_list(self) -> List:
        """Parse consecutive list items into one (possibly nested) List.

        For each item after the first, the target depth is the item's indent
        relative to the first item, capped at one more than the innermost
        open list. Deeper items open a list inside the last item of the
        innermost list; shallower items close lists until the depths match.
        """
        first = self._expect(ListItemToken)
        root = _OpenList(first.ordered, [_OpenItem(list(self._parse_inline_run()))])
        stack: list[tuple[_OpenList, int]] = [(root, 0)]

        while isinstance(token := self._current, ListItemToken):
            self._advance()
            top, top_depth = stack[-1]
            relative = max(0, token.indent - first.indent)
            depth = min(top_depth + 1, relative)
            if relative > depth:
                logger.debug(
                    "list item on line %d indented %d levels, nesting at %d",
                    token.lineno,
                    relative,
                    depth,
                )

            item = _OpenItem(list(self._parse_inline_run()))
            if depth > top_depth:
                if not top.items:
                    self._fail("list item to nest under")
                nested = _OpenList(token.ordered, [item])
                top.items[-1].children.append(nested)
                stack.append((nested, depth))
            else:
                while stack[-1][1] > depth:
                    stack.pop()
                stack[-1][0].items.append(item)

        return root.freeze()
