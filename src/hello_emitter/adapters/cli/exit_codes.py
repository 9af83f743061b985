"""Exit codes reported by the emitter.

Contents:
    * :class:`ExitCode` — IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit status for the two terminal states.

    Unexpected exceptions at the CLI boundary are translated separately by
    ``lib_cli_exit_tools.get_system_exit_code``.

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.INCOMPLETE_WRITE)
        1
    """

    SUCCESS = 0
    INCOMPLETE_WRITE = 1


__all__ = ["ExitCode"]
