"""Root CLI command: emit the message and report the outcome.

The write happens before configuration is read or logging is started, so
a broken config layer or a refused logging value can only cost the
diagnostics, never the message or its exit status.

Contents:
    * :func:`cli` - The single command; accepts and ignores every argument.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import ConfigError

from hello_emitter import __init__conf__
from hello_emitter.application.emit import emit_message
from hello_emitter.domain.errors import IncompleteWriteError

from .constants import CLICK_CONTEXT_SETTINGS
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from hello_emitter.composition import AppServices
    from hello_emitter.domain.behaviors import WriteReport

logger = logging.getLogger(__name__)


def _start_diagnostics(services: AppServices) -> None:
    """Load config and start logging, skipping both when either is refused.

    ``ValueError`` covers pydantic validation errors and the levels or
    streams lib_log_rich rejects at init.
    """
    try:
        services.init_logging(services.get_config())
    except (ConfigError, ValueError, OSError) as exc:
        logger.debug("Diagnostics unavailable: %s", exc)


def _log_outcome(report: WriteReport, ignored_args: int) -> None:
    """Record the write outcome inside a job scope once the runtime is up.

    Nothing is logged without the runtime, so stdlib's last-resort handler
    never reaches standard error.
    """
    if not lib_log_rich.runtime.is_initialised():
        return
    with lib_log_rich.runtime.bind(job_id="emit", extra={"command": "emit", "ignored_args": ignored_args}):
        if report.complete:
            logger.info("Message written", extra={"written": report.written})
        else:
            logger.warning(
                "Message not fully written: wrote %d of %d bytes",
                report.written,
                report.expected,
                extra={"written": report.written, "expected": report.expected},
            )


@click.command(
    __init__conf__.shell_command,
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    add_help_option=False,
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Write the message once and exit 0 on full delivery, 1 otherwise.

    Arguments end up in ``ctx.args`` and are never consulted.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_emitter.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["foo", "bar"], obj=build_testing)
        >>> result.exit_code
        0
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any

    try:
        report = emit_message(services.write_output)
    except IncompleteWriteError as exc:
        report = exc.report

    _start_diagnostics(services)
    _log_outcome(report, len(ctx.args))
    if not report.complete:
        ctx.exit(ExitCode.INCOMPLETE_WRITE)


__all__ = ["cli"]
