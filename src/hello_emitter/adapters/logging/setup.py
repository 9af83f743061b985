"""Centralized logging initialization for all entry points.

Provides a single source of truth for lib_log_rich runtime configuration so
module execution, console scripts and tests set logging up the same way,
exactly once.

Standard output carries the message and standard error stays empty, so the
console sink is always replaced by :class:`SilentConsole`, whatever the
config layers or the ``LOG_*`` environment overrides ask for.

Contents:
    * :class:`LoggingConfigModel` – pydantic view of the ``[lib_log_rich]`` section.
    * :class:`SilentConsole` – console port that renders nothing.
    * :func:`init_logging` – idempotent logging initialization with layered config.
"""

from __future__ import annotations

from typing import Any, cast

import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from hello_emitter import __init__conf__

# Keys owned by this module; values from config are discarded.
_PINNED_KEYS = frozenset({"console_stream", "console_stream_target", "console_adapter_factory"})


class LoggingConfigModel(BaseModel):
    """Pydantic model for [lib_log_rich] config section validation.

    Extra fields pass through to ``lib_log_rich.runtime.RuntimeConfig``.
    The defaults keep the runtime single-threaded even when the section is
    missing entirely.

    Example:
        >>> model = LoggingConfigModel(service="myapp", environment="staging")
        >>> model.service
        'myapp'

        >>> LoggingConfigModel().queue_enabled
        False
    """

    service: str | None = None
    environment: str = "prod"
    queue_enabled: bool = False

    model_config = ConfigDict(extra="allow")


class SilentConsole:
    """Console port that drops every event.

    Example:
        >>> console = SilentConsole()
        >>> console.flush()
    """

    def emit(self, event: Any, *, colorize: bool) -> None:
        return None

    def flush(self) -> None:
        return None


def _silent_console_factory(_appearance: object) -> SilentConsole:
    return SilentConsole()


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Build RuntimeConfig from the ``[lib_log_rich]`` section of ``config``.

    Unspecified values use lib_log_rich's built-in defaults, except for the
    fields :class:`LoggingConfigModel` pins. The service name defaults to the
    package name. The console is always muted.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})

    service = parsed.service or __init__conf__.name
    extra_config = parsed.model_dump(exclude={"service", "environment", *_PINNED_KEYS}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=service,
        environment=parsed.environment,
        console_stream="none",
        console_adapter_factory=_silent_console_factory,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich runtime with the provided configuration.

    Safe to call multiple times: the first call initializes the runtime and
    bridges stdlib ``logging`` into it, later calls return immediately.

    Args:
        config: Loaded layered configuration containing logging settings in
            the [lib_log_rich] section.

    Raises:
        ValueError: When the section fails validation or lib_log_rich refuses
            a value (unknown level, unknown stream).

    Example:
        >>> from lib_layered_config import Config
        >>> config = Config({"lib_log_rich": {"environment": "test"}}, {})
        >>> init_logging(config)  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    runtime_config = _build_runtime_config(config)
    lib_log_rich.runtime.init(runtime_config)
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "SilentConsole",
    "init_logging",
]
