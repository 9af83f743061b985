"""Configuration loader with caching."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import Config, read_config

from hello_emitter import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Protocol for config loader with cache_clear method."""

    def __call__(self, *, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path to the bundled default configuration file.

    Example:
        >>> path = get_default_config_path()
        >>> path.name
        'defaultconfig.toml'
        >>> path.exists()
        True
    """
    return Path(__file__).parent / "defaultconfig.toml"


# Loaded once per start_dir for the lifetime of the process.
@lru_cache(maxsize=4)
def _get_config_impl(*, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, start_dir: str | None = None) -> Config:
    """Load layered configuration with application defaults.

    Sources in precedence order: defaults → app → host → user → dotenv → env.
    The vendor, app and slug from ``__init__conf__`` determine the
    platform-specific search paths.

    Args:
        start_dir: Optional directory that seeds .env discovery. Defaults to
            the current working directory.

    Returns:
        Immutable configuration object with provenance tracking.

    Raises:
        lib_layered_config.ConfigError: When a layer exists but cannot be
            parsed.

    Example:
        >>> config = get_config()
        >>> config.get("lib_log_rich.queue_enabled")
        False
        >>> config.get("nonexistent", default="fallback")
        'fallback'
    """
    return _get_config_impl(start_dir=start_dir)


def _cache_clear() -> None:
    """Clear the internal configuration cache."""
    _get_config_impl.cache_clear()


# lru_cache's cache_clear is invisible to type checkers once the function is
# cast to a Protocol, so attach it explicitly.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
]
