"""Application ports — callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature matches the
corresponding adapter function. Module-level functions and bound methods
satisfy these protocols via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. ``Config`` is imported under
    ``TYPE_CHECKING`` only so the application layer carries no runtime
    dependency on the configuration library.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config


class WriteOutput(Protocol):
    """Deliver bytes to standard output and return how many were accepted."""

    def __call__(self, data: bytes) -> int: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "GetConfig",
    "InitLogging",
    "WriteOutput",
]
