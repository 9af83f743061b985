"""Configuration adapter - layered configuration loading via lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path

__all__ = [
    "get_config",
    "get_default_config_path",
]
