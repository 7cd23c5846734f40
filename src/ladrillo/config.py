"""ContextVar-based render configuration for Ladrillo.

Provides context-local configuration using Python's ContextVars (PEP 567).
A renderer built without an explicit config reads the active one at the
start of every render() call.

Thread Safety:
    ContextVars are context-local by design. Each thread has independent
    storage, so no locks are needed.

Usage:
    from ladrillo import render_to_string, text
    from ladrillo.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(strict=False)):
        html = render_to_string(page)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        strict: Raise RenderError for objects in the tree that are not nodes.
            When False, such objects are skipped and a warning is logged.
        validate_names: Reject empty or malformed element and attribute
            names with InvalidNameError. Names are emitted verbatim otherwise.

    """

    strict: bool = True
    validate_names: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from a dictionary.

        Only keys that are RenderConfig fields are used; unknown keys
        are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({"strict": False, "theme": "dark"})
            >>> config.strict
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the active render configuration for this context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context.

    Other threads and contexts are unaffected.
    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(validate_names=True)):
        ...     get_render_config().validate_names
        True

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
