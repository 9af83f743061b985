"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - The message constant and write assessment
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import MESSAGE, WriteReport, assess_write, build_message
from .errors import IncompleteWriteError

__all__ = [
    # Behaviors
    "MESSAGE",
    "WriteReport",
    "assess_write",
    "build_message",
    # Errors
    "IncompleteWriteError",
]
