from __future__ import annotations

"""
Manifest Location Service.

Finds the directory holding a project manifest (or any named file) by
walking the file tree, either down into the descendants of a starting
point or up through its ancestors. A failed search returns None; it is an
ordinary outcome, not an error.
"""

import logging
import os
from typing import Optional

from sway_utils.domain.constants import MANIFEST_FILE_NAME
from sway_utils.domain.discovery_models import ManifestCheck
from sway_utils.infra.fs import (
    PathLike,
    canonicalize_path,
    is_filesystem_root,
    parent_dir,
)

logger = logging.getLogger(__name__)


# ==============================================================================
# DOWNWARD SEARCH
# ==============================================================================

def find_nested_manifest_dir(starter_path: PathLike) -> Optional[str]:
    """Go down the file tree until a Forc manifest is found."""
    return find_nested_dir_with_file(starter_path, MANIFEST_FILE_NAME)


def find_nested_dir_with_file(starter_path: PathLike, file_name: str) -> Optional[str]:
    """
    Go down the file tree until an entry named 'file_name' is found.

    The search root is 'starter_path' itself when it is a directory, or its
    parent otherwise. A match sitting directly in the search root is
    ignored: only occurrences inside descendant directories count.

    Args:
        starter_path: Existing directory (or file) to start from.
        file_name: Exact entry name to look for.

    Returns:
        Optional[str]: Directory containing the first match in walk order,
                       or None if the subtree has no match.
    """
    start = os.fspath(starter_path)
    if not os.path.exists(start):
        return None

    starter_dir = start if os.path.isdir(start) else os.path.dirname(start)
    if not starter_dir:
        starter_dir = os.curdir

    own_entry = os.path.join(starter_dir, file_name)

    # Unreadable directories are skipped by os.walk (onerror=None)
    for root, dirs, files in os.walk(starter_dir):
        if file_name not in files and file_name not in dirs:
            continue
        if os.path.join(root, file_name) == own_entry:
            continue
        return root

    return None


# ==============================================================================
# UPWARD SEARCH
# ==============================================================================

def find_parent_dir_with_file(starter_path: PathLike, file_name: str) -> Optional[str]:
    """
    Go up the file tree until a directory containing 'file_name' is found.

    'starter_path' is canonicalized first, then each level is probed from
    the canonical path upwards. The filesystem root ends the walk and is
    not probed itself.

    Args:
        starter_path: Existing path to start from.
        file_name: Entry name that must exist in the returned directory.

    Returns:
        Optional[str]: Nearest matching ancestor (inclusive), or None if the
                       root is reached or 'starter_path' cannot be resolved.
    """
    path = canonicalize_path(starter_path)
    if path is None:
        return None

    while not is_filesystem_root(path):
        if os.path.exists(os.path.join(path, file_name)):
            return path
        path = os.path.dirname(path)

    return None


def find_parent_manifest_dir(starter_path: PathLike) -> Optional[str]:
    """Go up the file tree until a Forc manifest is found."""
    return find_parent_dir_with_file(starter_path, MANIFEST_FILE_NAME)


def find_parent_manifest_dir_with_check(
        starter_path: PathLike,
        check: ManifestCheck,
) -> Optional[str]:
    """
    Go up the file tree until a Forc manifest accepted by 'check' is found.

    Manifests whose directory is rejected by 'check' are skipped and the
    search resumes from that directory's parent.

    Args:
        starter_path: Existing path to start from.
        check: Predicate receiving a candidate manifest directory.

    Returns:
        Optional[str]: First accepted manifest directory, or None.

    Raises:
        TypeError: If 'check' is not callable.
    """
    if not callable(check):
        raise TypeError(f"check must be callable, got {type(check).__name__}")

    next_start: Optional[str] = os.fspath(starter_path)
    while next_start is not None:
        manifest_dir = find_parent_manifest_dir(next_start)
        if manifest_dir is None:
            return None
        if check(manifest_dir):
            return manifest_dir

        logger.debug(f"Manifest at '{manifest_dir}' rejected by check, searching above it")
        next_start = parent_dir(manifest_dir)

    return None
