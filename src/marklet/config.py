"""ContextVar-based compile configuration for marklet.

Configuration is read by the lexer when it is created, so a config set for
the current context applies to every compile started inside it. ContextVars
keep threads and asyncio tasks isolated from each other.

Usage:
    from marklet.config import CompileConfig, compile_config_context

    with compile_config_context(CompileConfig(list_indent_size=4)):
        html = marklet.compile(source)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields

DEFAULT_LIST_INDENT_SIZE = 2


@dataclass(frozen=True, slots=True)
class CompileConfig:
    """Immutable compile configuration.

    Attributes:
        list_indent_size: Leading spaces that make up one list nesting level.
            A list item's indent is ``leading_spaces // list_indent_size``.

    """

    list_indent_size: int = DEFAULT_LIST_INDENT_SIZE

    def __post_init__(self) -> None:
        if self.list_indent_size < 1:
            raise ValueError(
                f"list_indent_size must be at least 1, got {self.list_indent_size}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> CompileConfig:
        """Create CompileConfig from dictionary.

        Unknown keys are ignored so hosts can pass a wider settings mapping.

        Example:
            >>> CompileConfig.from_dict({"list_indent_size": 4, "theme": "dark"})
            CompileConfig(list_indent_size=4)

        """
        valid_fields = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in valid_fields})


_DEFAULT_CONFIG: CompileConfig = CompileConfig()

_compile_config: ContextVar[CompileConfig] = ContextVar(
    "compile_config",
    default=_DEFAULT_CONFIG,
)


def get_compile_config() -> CompileConfig:
    """Get the configuration active in the current context."""
    return _compile_config.get()


def set_compile_config(config: CompileConfig) -> None:
    """Set the configuration for the current context."""
    _compile_config.set(config)


def reset_compile_config() -> None:
    """Reset the current context to the default configuration."""
    _compile_config.set(_DEFAULT_CONFIG)


@contextmanager
def compile_config_context(config: CompileConfig) -> Iterator[None]:
    """Temporarily activate a configuration.

    The previous configuration is restored on exit, even if the body raises.

    Example:
        >>> with compile_config_context(CompileConfig(list_indent_size=4)):
        ...     get_compile_config().list_indent_size
        4

    """
    token = _compile_config.set(config)
    try:
        yield
    finally:
        _compile_config.reset(token)


__all__ = [
    "DEFAULT_LIST_INDENT_SIZE",
    "CompileConfig",
    "compile_config_context",
    "get_compile_config",
    "reset_compile_config",
    "set_compile_config",
]
