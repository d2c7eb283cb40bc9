"""
marklet: a small Markdown-subset to HTML compiler.

Converts headers, emphasis, lists, blockquotes, code, links, images and
rules into compact HTML fragments for embedding in a preview surface.
Compilation is a linear pipeline (text -> tokens -> tree -> HTML) with zero
runtime dependencies.

Quick Start:
    >>> import marklet
    >>> marklet.compile("**bold**")
    '<p><b>bold</b></p>'

    >>> # The stages are available separately
    >>> tokens = marklet.tokenize("> quoted")
    >>> root = marklet.parse(tokens)
    >>> marklet.render(root)
    '<blockquote><p>quoted</p></blockquote>'

    >>> # Or bundle a configuration
    >>> from marklet import CompileConfig, Compiler
    >>> compiler = Compiler(CompileConfig(list_indent_size=4))
    >>> html = compiler("- a\\n    - b")

Command Line:
    marklet notes.md notes.html --page
"""

from collections.abc import Sequence

from marklet.config import (
    CompileConfig,
    compile_config_context,
    get_compile_config,
    reset_compile_config,
    set_compile_config,
)
from marklet.errors import MarkdownSyntaxError, MarkletError, RenderError
from marklet.lexer import Lexer
from marklet.nodes import (
    Block,
    CodeBlock,
    CodeInline,
    Header,
    HorizontalRule,
    Image,
    Inline,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Quote,
    QuoteItem,
    Root,
    Text,
)
from marklet.page import DEFAULT_TITLE, wrap_page
from marklet.parser import Parser
from marklet.renderers.html import HtmlRenderer
from marklet.tokens import Token
from marklet.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Split Markdown source into the flat token list.

    Args:
        source: Markdown source text
        source_file: Optional source file path for error messages

    Returns:
        Tokens in source order; a non-empty list always ends with a
        NewLineToken.

    Example:
        >>> tokenize("text")
        [TextToken(content='text', bold=False, italic=False), NewLineToken()]
    """
    return Lexer(source, source_file).tokenize()


def parse(tokens: Sequence[Token], *, source_file: str | None = None) -> Root:
    """Build the document tree from a token list.

    Raises:
        MarkdownSyntaxError: If the tokens do not form a valid document.
    """
    return Parser(tokens, source_file).parse()


def render(root: Root) -> str:
    """Render a document tree to an HTML fragment."""
    return HtmlRenderer().render(root)


def compile(source: str, *, source_file: str | None = None) -> str:
    """Compile Markdown source to an HTML fragment.

    Uses the configuration active in the current context (see
    ``compile_config_context``).

    Args:
        source: Markdown source text
        source_file: Optional source file path for error messages

    Returns:
        HTML fragment

    Raises:
        MarkdownSyntaxError: If the source cannot be compiled. No partial
            output is produced.

    Example:
        >>> compile("> line 1\\n> line 2")
        '<blockquote><p>line 1</p><p>line 2</p></blockquote>'
    """
    tokens = tokenize(source, source_file=source_file)
    root = parse(tokens, source_file=source_file)
    logger.debug("compiled %d tokens into %d blocks", len(tokens), len(root.children))
    return render(root)


def compile_page(
    source: str,
    *,
    title: str = DEFAULT_TITLE,
    source_file: str | None = None,
) -> str:
    """Compile Markdown source into a complete preview HTML document."""
    return wrap_page(compile(source, source_file=source_file), title=title)


class Compiler:
    """Compiler bound to a fixed configuration.

    Each call activates the configuration for its own duration only, so
    instances with different settings can be used side by side.

    Usage:
        >>> compiler = Compiler(CompileConfig(list_indent_size=4))
        >>> compiler("1. one\\n    2. two")
        '<ol><li>one<ol><li>two</li></ol></li></ol>'

    Thread Safety:
        Uses ContextVar for configuration. Safe to use concurrently from
        different threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: CompileConfig | None = None) -> None:
        self._config = config or CompileConfig()

    @property
    def config(self) -> CompileConfig:
        return self._config

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        return self.compile(source, source_file=source_file)

    def tokenize(self, source: str, *, source_file: str | None = None) -> list[Token]:
        with compile_config_context(self._config):
            return tokenize(source, source_file=source_file)

    def parse(self, tokens: Sequence[Token], *, source_file: str | None = None) -> Root:
        with compile_config_context(self._config):
            return parse(tokens, source_file=source_file)

    def render(self, root: Root) -> str:
        return render(root)

    def compile(self, source: str, *, source_file: str | None = None) -> str:
        """Compile Markdown source to an HTML fragment using this configuration."""
        with compile_config_context(self._config):
            return compile(source, source_file=source_file)


__all__ = [
    # Pipeline
    "compile",
    "compile_page",
    "tokenize",
    "parse",
    "render",
    "Compiler",
    "Lexer",
    "Parser",
    "HtmlRenderer",
    "wrap_page",
    # Configuration
    "CompileConfig",
    "compile_config_context",
    "get_compile_config",
    "reset_compile_config",
    "set_compile_config",
    # Errors
    "MarkletError",
    "MarkdownSyntaxError",
    "RenderError",
    # Nodes
    "Block",
    "CodeBlock",
    "CodeInline",
    "Header",
    "HorizontalRule",
    "Image",
    "Inline",
    "Link",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "Quote",
    "QuoteItem",
    "Root",
    "Text",
    "Token",
    "__version__",
]
