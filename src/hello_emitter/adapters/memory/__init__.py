"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no real stdout, no filesystem, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapter
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.stdout` - In-memory output adapter (StdoutSpy class)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .logging import init_logging_in_memory
from .stdout import StdoutSpy

# Static conformance assertions
if TYPE_CHECKING:
    from hello_emitter.application.ports import GetConfig, InitLogging, WriteOutput

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_write_output: WriteOutput = StdoutSpy().write_output

__all__ = [
    "StdoutSpy",
    "get_config_in_memory",
    "init_logging_in_memory",
]
