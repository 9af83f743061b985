"""Standard output writer that reports how many bytes were delivered.

Contents:
    * :func:`write_all` - Loop ``os.write`` over a descriptor until done or failed.
    * :func:`write_to_stream` - Same contract for file objects without a descriptor.
    * :func:`write_to_stdout` - Production adapter for the ``WriteOutput`` port.

System Role:
    The only place that touches the process's standard output. Channel
    failures are converted into a short count here and never escape, so the
    caller decides success or failure from the number alone.
"""

from __future__ import annotations

import io
import logging
import os
import sys
from typing import IO, Any

logger = logging.getLogger(__name__)


def write_all(fd: int, data: bytes) -> int:
    """Write ``data`` to file descriptor ``fd``, retrying partial writes.

    Stops at the first zero-length write or ``OSError`` (``EPIPE``,
    ``EBADF``, ``ENOSPC``, ...). ``EINTR`` is retried by the interpreter.

    Args:
        fd: An open, writable file descriptor.
        data: Bytes to deliver.

    Returns:
        Number of bytes the descriptor accepted.

    Example:
        >>> read_end, write_end = os.pipe()
        >>> write_all(write_end, b"Hello World!")
        12
        >>> os.close(write_end)
        >>> os.read(read_end, 64)
        b'Hello World!'
        >>> os.close(read_end)
    """
    view = memoryview(data)
    written = 0
    while written < len(view):
        try:
            count = os.write(fd, view[written:])
        except OSError as exc:
            logger.debug("Write to fd %d failed after %d bytes: %s", fd, written, exc)
            break
        if count == 0:
            break
        written += count
    return written


def write_to_stream(stream: IO[Any], data: bytes) -> int:
    """Write ``data`` to a file object and flush it.

    Binary streams receive the bytes directly; text streams without an
    underlying buffer receive the ASCII decoding. A non-blocking stream
    that fills up reports the accepted count on ``BlockingIOError``; any
    other failure counts as zero bytes.

    Args:
        stream: Binary stream, or text stream with or without ``.buffer``.
        data: Bytes to deliver.

    Returns:
        Number of bytes accepted.
    """
    binary = getattr(stream, "buffer", None)
    if binary is not None:
        target, payload = binary, data
    elif isinstance(stream, io.TextIOBase):
        target, payload = stream, data.decode("ascii")
    else:
        target, payload = stream, data
    try:
        target.write(payload)
        target.flush()
    except BlockingIOError as exc:
        logger.debug("Stream %r would block after %d bytes", stream, exc.characters_written)
        return min(exc.characters_written, len(data))
    except (OSError, ValueError) as exc:
        logger.debug("Write to stream %r failed: %s", stream, exc)
        return 0
    return len(data)


def write_to_stdout(data: bytes) -> int:
    """Deliver ``data`` to the process's standard output.

    Prefers the raw descriptor so the count is exact. Falls back to the
    stream object when stdout has been replaced by something without a
    descriptor (test runners, embedded interpreters). A process started
    with stdout closed has ``sys.stdout`` set to ``None``; nothing can be
    written then.

    Args:
        data: Bytes to deliver.

    Returns:
        Number of bytes accepted.
    """
    stream = sys.stdout
    if stream is None:
        logger.debug("Standard output is not available")
        return 0
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return write_to_stream(stream, data)
    return write_all(fd, data)


__all__ = [
    "write_all",
    "write_to_stdout",
    "write_to_stream",
]
