"""Shared pytest fixtures for CLI, adapter and subprocess tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Iterator, Sequence
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from hello_emitter.adapters.memory import StdoutSpy
    from hello_emitter.composition import AppServices

CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: Environment variables that could steer configuration or logging of a child process.
_STEERING_PREFIXES: tuple[str, ...] = ("HELLO_EMITTER___", "LIB_LOG_RICH", "LOG_")


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Click 8.2+ keeps ``result.stdout`` and ``result.stderr`` apart, so the
    emitted bytes can be compared exactly via ``result.stdout_bytes``.
    """
    return CliRunner()


@pytest.fixture
def stdout_spy() -> StdoutSpy:
    """Provide a fresh in-memory output channel."""
    from hello_emitter.adapters.memory import StdoutSpy

    return StdoutSpy()


@pytest.fixture
def testing_factory(stdout_spy: StdoutSpy) -> Callable[[], AppServices]:
    """Services factory wired to in-memory adapters sharing ``stdout_spy``.

    Example:
        def test_emit(cli_runner, testing_factory, stdout_spy) -> None:
            cli_runner.invoke(cli, [], obj=testing_factory)
            assert bytes(stdout_spy.captured) == b"Hello World!"
    """
    from hello_emitter.composition import build_testing

    return lambda: build_testing(spy=stdout_spy)


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from hello_emitter.composition import build_production

    return build_production


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, so a monkeypatched loader does not break teardown.
    """
    from hello_emitter.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def logging_runtime_reset() -> Iterator[None]:
    """Shut the lib_log_rich runtime down after the test if it was started."""
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def isolated_env(tmp_path: Path) -> dict[str, str]:
    """Environment for child processes with no user config and no steering variables."""
    env = {key: value for key, value in os.environ.items() if not key.startswith(_STEERING_PREFIXES)}
    env["HOME"] = str(tmp_path)
    env["XDG_CONFIG_HOME"] = str(tmp_path / ".config")
    return env


@pytest.fixture
def run_emitter(tmp_path: Path, isolated_env: dict[str, str]) -> Callable[..., subprocess.CompletedProcess[bytes]]:
    """Run ``python -m hello_emitter`` in a clean working directory.

    Keyword arguments are forwarded to :func:`subprocess.run`; ``stdout``
    defaults to a pipe so the exact bytes can be compared.

    Example:
        def test_output(run_emitter) -> None:
            assert run_emitter().stdout == b"Hello World!"
    """

    def _run(args: Sequence[str] = (), **kwargs: Any) -> subprocess.CompletedProcess[bytes]:
        kwargs.setdefault("stdout", subprocess.PIPE)
        kwargs.setdefault("stderr", subprocess.PIPE)
        kwargs.setdefault("env", isolated_env)
        return subprocess.run(  # noqa: S603
            [sys.executable, "-m", "hello_emitter", *args],
            cwd=tmp_path,
            timeout=60,
            check=False,
            **kwargs,
        )

    return _run
