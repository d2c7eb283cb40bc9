"""Block-level classifiers for the marklet lexer.

Each classifier is a mixin that recognizes one block construct at the
cursor. A classifier either emits its tokens and advances the cursor, or
returns False without touching lexer state.
"""

from marklet.lexer.classifiers.fence import (
    FenceClassifierMixin,
)
from marklet.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from marklet.lexer.classifiers.list import (
    ListClassifierMixin,
)
from marklet.lexer.classifiers.quote import (
    QuoteClassifierMixin,
)
from marklet.lexer.classifiers.thematic import (
    ThematicClassifierMixin,
)

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "ThematicClassifierMixin",
]
