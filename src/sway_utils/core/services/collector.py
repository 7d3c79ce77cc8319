from __future__ import annotations

"""
Source File Discovery Service.

Enumerates the Sway source files below a project directory. The walk is
best-effort: a directory that cannot be listed is skipped and reported,
never allowed to abort the whole collection.
"""

import logging
import os
from typing import List, Optional

from sway_utils.domain.constants import SWAY_EXTENSION
from sway_utils.domain.discovery_models import DiscoveryError
from sway_utils.infra.fs import PathLike, list_directory

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def get_sway_files(
        root: PathLike,
        errors: Optional[List[DiscoveryError]] = None,
) -> List[str]:
    """
    Collect every Sway source file under 'root', at any depth.

    Uses an explicit stack of pending directories instead of recursion, so
    arbitrarily deep trees cannot exhaust the interpreter stack.

    Args:
        root: Directory to scan.
        errors: Optional sink receiving a DiscoveryError for each directory
                that could not be listed.

    Returns:
        List[str]: Paths of the matching files, in no particular order.
    """
    files: List[str] = []
    pending: List[str] = [os.fspath(root)]

    while pending:
        current = pending.pop()
        try:
            entries = list_directory(current)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory '{current}': {e}")
            if errors is not None:
                errors.append(DiscoveryError(path=current, error=str(e)))
            continue

        for entry in entries:
            if _is_dir_entry(entry):
                pending.append(entry.path)
            elif is_sway_file(entry.path):
                files.append(entry.path)

    logger.debug(f"Collected {len(files)} Sway files under '{os.fspath(root)}'")
    return files


def is_sway_file(path: PathLike) -> bool:
    """
    Check whether 'path' is an existing regular file with the Sway extension.

    Args:
        path: Candidate file path.

    Returns:
        bool: True for files such as 'main.sw'; False for directories,
              missing paths and any other (or no) extension.
    """
    p = os.fspath(path)
    if not os.path.isfile(p):
        return False
    _, ext = os.path.splitext(p)
    return ext[1:] == SWAY_EXTENSION


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _is_dir_entry(entry: os.DirEntry) -> bool:
    """DirEntry.is_dir() that reports a failed stat as 'not a directory'."""
    try:
        return entry.is_dir()
    except OSError as e:
        logger.debug(f"Cannot stat '{entry.path}': {e}")
        return False
