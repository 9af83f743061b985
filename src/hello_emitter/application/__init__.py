"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.emit` - The emit use case
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .emit import emit_message
from .ports import GetConfig, InitLogging, WriteOutput

__all__ = [
    "GetConfig",
    "InitLogging",
    "WriteOutput",
    "emit_message",
]
