from __future__ import annotations

"""
Domain Constants.

Fixed names shared with the Forc toolchain: the extension that marks a
Sway source file and the reserved name of a project manifest.
"""

from typing import Final

# Compared against os.path.splitext() output with the leading dot removed
SWAY_EXTENSION: Final[str] = "sw"
MANIFEST_FILE_NAME: Final[str] = "Forc.toml"
