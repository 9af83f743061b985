"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

#: The fixed message written to standard output, without a trailing newline.
MESSAGE: Final[bytes] = b"Hello World!"


@dataclass(frozen=True, slots=True)
class WriteReport:
    """Outcome of a single attempt to deliver a byte sequence.

    Attributes:
        written: Number of bytes the output channel accepted.
        expected: Number of bytes that had to be delivered.

    Example:
        >>> WriteReport(written=12, expected=12).complete
        True
        >>> WriteReport(written=5, expected=12).missing
        7
    """

    written: int
    expected: int

    @property
    def complete(self) -> bool:
        """True when every expected byte was accepted."""
        return self.written == self.expected

    @property
    def missing(self) -> int:
        """Number of bytes that never reached the channel."""
        return self.expected - self.written


def build_message() -> bytes:
    r"""Return the message the emitter writes.

    Returns:
        The 12-byte ASCII sequence ``Hello World!``.

    Example:
        >>> build_message()
        b'Hello World!'
        >>> len(build_message())
        12
    """
    return MESSAGE


def assess_write(written: int, data: bytes = MESSAGE) -> WriteReport:
    """Compare the byte count reported by the output channel with ``data``.

    Args:
        written: Count returned by the writer.
        data: The bytes that were supposed to be written.

    Returns:
        A :class:`WriteReport` for the attempt.

    Example:
        >>> assess_write(12).complete
        True
        >>> assess_write(0).complete
        False
    """
    return WriteReport(written=written, expected=len(data))


__all__ = [
    "MESSAGE",
    "WriteReport",
    "assess_write",
    "build_message",
]
