"""Static package metadata surfaced to the CLI and configuration layers.

These values are kept in sync with ``pyproject.toml`` by hand, so runtime code
does not query packaging metadata.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "hello_emitter"
#: Human-readable summary of the package.
title = "Write a fixed greeting to standard output and report delivery via exit status"
#: Current release version.
version = "1.0.0"
#: Console-script name published by the package.
shell_command = "hello-emitter"

#: Vendor identifier for lib_layered_config paths (macOS/Windows)
LAYEREDCONF_VENDOR: str = "bitranox"
#: Application display name for lib_layered_config paths (macOS/Windows)
LAYEREDCONF_APP: str = "Hello Emitter"
#: Configuration slug for lib_layered_config Linux paths and environment variables
LAYEREDCONF_SLUG: str = "hello-emitter"
