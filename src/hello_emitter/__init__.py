"""Public package surface exposing the message, the emit use case and wiring.

Routes imports through the architectural layers:
- Domain exports: the message and the write assessment
- Application exports: the emit use case
- Composition exports: wired adapter services
"""

from __future__ import annotations

from .application.emit import emit_message
from .composition import build_production, build_testing
from .domain.behaviors import MESSAGE, WriteReport, build_message
from .domain.errors import IncompleteWriteError

__all__ = [
    "MESSAGE",
    "IncompleteWriteError",
    "WriteReport",
    "build_message",
    "build_production",
    "build_testing",
    "emit_message",
]
