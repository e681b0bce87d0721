"""ContextVar-based parse configuration for mdinline.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per parse call (or per Markdown instance) and read by
the parser while it runs.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Direct parser usage (advanced)
    from mdinline.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(flavor=Flavor.EXTENDED))
    try:
        paragraph = Parser(source).parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(strict=True)):
        paragraph = Parser(source).parse()

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

from mdinline.flavor import Flavor


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        flavor: Inline grammar to run
        wrap_lines: Merge physical lines into logical lines before parsing.
            When False every physical line is parsed on its own.
        strict: Raise ParseError when a line cannot be parsed at all,
            instead of rendering the diagnostic as plain text
        text_transformer: Optional callback applied to every ordinary-text run

    """

    flavor: Flavor = Flavor.STANDARD
    wrap_lines: bool = True
    strict: bool = False
    text_transformer: Callable[[str], str] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ParseConfig":
        """Create ParseConfig from a dictionary.

        Unknown keys are ignored. ``flavor`` may be given as a name, which
        is resolved with ``Flavor.from_name``.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "flavor": "extended-math",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.flavor
            <Flavor.EXTENDED_MATH: 'extended_math'>

        Raises:
            FlavorError: If ``flavor`` names no known flavor.

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "flavor" in filtered:
            filtered["flavor"] = Flavor.from_name(filtered["flavor"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "mdinline_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context.

    Only affects the current thread's context.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the module-level default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(flavor=Flavor.EXTENDED)):
        ...     paragraph = Parser("~~gone~~").parse()

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
