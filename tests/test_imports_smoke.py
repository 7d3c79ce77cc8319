# tests/test_imports_smoke.py
# -----------------------------------------------------------------------------
# Smoke tests for the public package surface.
#
# Goals:
# - Ensure sway_utils is importable without configuring logging.
# - Validate the top-level package exposes the API used by build tooling.
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

import sway_utils


def test_package_importable():
    assert sway_utils is not None
    assert isinstance(sway_utils.__version__, str)


def test_public_api_contract():
    required = [
        "get_sway_files",
        "is_sway_file",
        "iter_prefixes",
        "find_nested_manifest_dir",
        "find_nested_dir_with_file",
        "find_parent_dir_with_file",
        "find_parent_manifest_dir",
        "find_parent_manifest_dir_with_check",
        "SWAY_EXTENSION",
        "MANIFEST_FILE_NAME",
    ]
    for name in required:
        assert hasattr(sway_utils, name), f"sway_utils missing: {name}"
        assert name in sway_utils.__all__


def test_import_does_not_configure_logging():
    root = logging.getLogger()
    assert not getattr(root, "_sway_utils_configured", False)
