"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Output services
from ..adapters.stdout.writer import write_to_stdout

# Static conformance assertions — pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.stdout import StdoutSpy
    from ..application.ports import GetConfig, InitLogging, WriteOutput

    _assert_write_output: WriteOutput = write_to_stdout
    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    write_output: WriteOutput
    get_config: GetConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        write_output=write_to_stdout,
        get_config=get_config,
        init_logging=init_logging,
    )


def build_testing(*, spy: StdoutSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional StdoutSpy capturing the written bytes. When None, a
            fresh spy is created. Pass your own to assert on the output or
            to simulate a short write via ``capacity``.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import StdoutSpy, get_config_in_memory, init_logging_in_memory

    stdout_spy = spy if spy is not None else StdoutSpy()

    return AppServices(
        write_output=stdout_spy.write_output,
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "get_config",
    "init_logging",
    "write_to_stdout",
    "AppServices",
    "build_production",
    "build_testing",
]
