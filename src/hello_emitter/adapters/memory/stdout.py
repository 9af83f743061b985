"""In-memory standard output adapter for testing.

Contents:
    * :class:`StdoutSpy` - Captures written bytes and can simulate short writes.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class StdoutSpy:
    """Captures ``write_output`` calls for test assertions.

    Attributes:
        captured: Every byte accepted so far.
        calls: Number of ``write_output`` invocations.
        capacity: When set, total number of bytes the fake channel accepts
            before it behaves like a closed pipe.

    Example:
        >>> spy = StdoutSpy()
        >>> spy.write_output(b"Hello World!")
        12
        >>> bytes(spy.captured)
        b'Hello World!'

        >>> short = StdoutSpy(capacity=5)
        >>> short.write_output(b"Hello World!")
        5
    """

    captured: bytearray = field(default_factory=bytearray)
    calls: int = 0
    capacity: int | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.captured.clear()
        self.calls = 0

    def write_output(self, data: bytes) -> int:
        """Accept as much of ``data`` as the remaining capacity allows."""
        self.calls += 1
        accepted = data
        if self.capacity is not None:
            remaining = max(self.capacity - len(self.captured), 0)
            accepted = data[:remaining]
        self.captured.extend(accepted)
        return len(accepted)


__all__ = ["StdoutSpy"]
