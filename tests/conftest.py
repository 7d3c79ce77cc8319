from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A shared on-disk Sway workspace used by the discovery tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sway_workspace(tmp_path: Path) -> Path:
    """
    Create a Forc workspace with two member packages.

    Structure:
    /workspace
      Forc.toml
      /contract
        Forc.toml
        /src
          main.sw
          /lib
            utils.sw
      /script
        Forc.toml
        /src
          main.sw
          notes.txt
      README.md
    """
    root = tmp_path / "workspace"
    root.mkdir()
    (root / "Forc.toml").write_text("[workspace]\nmembers = [\"contract\", \"script\"]\n", encoding="utf-8")
    (root / "README.md").write_text("# Workspace", encoding="utf-8")

    contract = root / "contract"
    (contract / "src" / "lib").mkdir(parents=True)
    (contract / "Forc.toml").write_text("[project]\nname = \"contract\"\n", encoding="utf-8")
    (contract / "src" / "main.sw").write_text("contract;\n", encoding="utf-8")
    (contract / "src" / "lib" / "utils.sw").write_text("library;\n", encoding="utf-8")

    script = root / "script"
    (script / "src").mkdir(parents=True)
    (script / "Forc.toml").write_text("[project]\nname = \"script\"\n", encoding="utf-8")
    (script / "src" / "main.sw").write_text("script;\n", encoding="utf-8")
    (script / "src" / "notes.txt").write_text("todo", encoding="utf-8")

    return root
