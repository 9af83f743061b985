"""Standard output adapter.

Contents:
    * :func:`.writer.write_to_stdout` - Production ``WriteOutput`` implementation
"""

from __future__ import annotations

from .writer import write_all, write_to_stdout, write_to_stream

__all__ = ["write_all", "write_to_stdout", "write_to_stream"]
