"""ContextVar-based lexer configuration for nashlex.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Lexer snapshots the active config when it is constructed, so a stream
keeps its behavior even if the config changes while it is being consumed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from nashlex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(skip_comments=True)):
        tokens = tokenize(source)

    # Or pass it explicitly
    lexer = Lexer("build.sh", source, config=LexConfig(auto_semicolons=False))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        auto_semicolons: Insert SEMICOLON tokens at end of statements
            (newline or EOF after a statement-ending token). Disable to get
            the older token vectors without implicit terminators.
        skip_comments: Drop COMMENT tokens from the stream (parsers that do
            not keep comments); formatters keep the default.
        default_name: Label used in diagnostics when the input has no name.

    """

    auto_semicolons: bool = True
    skip_comments: bool = False
    default_name: str = "<none>"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({"skip_comments": True, "color": "red"})
            >>> config.skip_comments
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (context-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton.
    """
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(auto_semicolons=False)):
        ...     tokens = tokenize("echo hello")
        >>> # Automatically reset to previous config

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
