"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.stdout` - Writing the message to standard output
    * :mod:`.config` - Configuration loading via lib_layered_config
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - Click CLI framework integration
    * :mod:`.memory` - In-memory test doubles for every port
"""

from __future__ import annotations

__all__: list[str] = []
