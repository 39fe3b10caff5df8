"""ContextVar-based selector configuration for Selectra.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read by combine() each time it is called.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from selectra import combine, element
    from selectra.config import SelectorConfig, selector_config_context

    with selector_config_context(SelectorConfig(strict_combinators=True)):
        combine(element("ul"), ">", element("li"))  # ok
        combine(element("ul"), "|", element("li"))  # UnknownCombinatorError

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectorConfig:
    """Immutable selector configuration.

    Attributes:
        strict_combinators: Reject combinator tokens other than
            ' ', '>', '+' and '~'. When False, any token is inserted verbatim.

    """

    strict_combinators: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "SelectorConfig":
        """Create SelectorConfig from dictionary.

        Only includes keys that are valid SelectorConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = SelectorConfig.from_dict({
            ...     "strict_combinators": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_combinators
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: SelectorConfig = SelectorConfig()

_selector_config: ContextVar[SelectorConfig] = ContextVar(
    "selector_config",
    default=_DEFAULT_CONFIG,
)


def get_selector_config() -> SelectorConfig:
    """Get current selector configuration (thread-local)."""
    return _selector_config.get()


def set_selector_config(config: SelectorConfig) -> None:
    """Set selector configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _selector_config.set(config)


def reset_selector_config() -> None:
    """Reset to default configuration."""
    _selector_config.set(_DEFAULT_CONFIG)


@contextmanager
def selector_config_context(config: SelectorConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: SelectorConfig to use within the context.

    Yields:
        None

    """
    previous = _selector_config.get()
    _selector_config.set(config)
    try:
        yield
    finally:
        _selector_config.set(previous)


__all__ = [
    "SelectorConfig",
    "get_selector_config",
    "set_selector_config",
    "reset_selector_config",
    "selector_config_context",
]
