"""Emit use case: write the message once and judge the outcome."""

from __future__ import annotations

from ..domain.behaviors import WriteReport, assess_write, build_message
from ..domain.errors import IncompleteWriteError
from .ports import WriteOutput


def emit_message(write_output: WriteOutput) -> WriteReport:
    """Write the message through ``write_output`` exactly once.

    There is no retry: a short count is final.

    Args:
        write_output: Port implementation that delivers the bytes.

    Returns:
        The report of a complete write.

    Raises:
        IncompleteWriteError: When fewer bytes than the message length
            were accepted.

    Example:
        >>> emit_message(lambda data: len(data))
        WriteReport(written=12, expected=12)
    """
    message = build_message()
    report = assess_write(write_output(message), message)
    if not report.complete:
        raise IncompleteWriteError(report)
    return report


__all__ = ["emit_message"]
