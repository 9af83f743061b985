"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from .behaviors import WriteReport


class IncompleteWriteError(Exception):
    """The output channel accepted fewer bytes than the message length.

    Covers every cause alike (closed descriptor, broken pipe, full disk,
    device error); the writer has no visibility into which one occurred.
    Caught at the CLI boundary and turned into the failure exit status.

    Example:
        >>> from hello_emitter.domain.behaviors import WriteReport
        >>> err = IncompleteWriteError(WriteReport(written=3, expected=12))
        >>> str(err)
        'wrote 3 of 12 bytes'
        >>> err.missing
        9
    """

    def __init__(self, report: WriteReport) -> None:
        super().__init__(f"wrote {report.written} of {report.expected} bytes")
        self.report = report

    @property
    def written(self) -> int:
        return self.report.written

    @property
    def expected(self) -> int:
        return self.report.expected

    @property
    def missing(self) -> int:
        return self.report.missing


__all__ = ["IncompleteWriteError"]
