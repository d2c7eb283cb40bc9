"""Exception classes for marklet.

Every error raised by the compiler derives from MarkletError. A failed
compile always surfaces as MarkdownSyntaxError; there is no partial result.
"""

from __future__ import annotations


class MarkletError(Exception):
    """Base exception for all marklet errors."""

    pass


class MarkdownSyntaxError(MarkletError):
    """Input the compiler cannot turn into a document.

    Raised by the lexer when it cannot advance past the remaining input, and
    by the parser when a required token is missing or of the wrong kind.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize syntax error with optional location.

        Args:
            message: Error description
            lineno: Source line the offending token started on (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + ": "

        super().__init__(f"{location}{message}")


class RenderError(MarkletError):
    """Error during HTML rendering.

    Raised when the renderer is handed a node it has no rule for, which can
    only happen for trees built by hand.
    """

    pass
