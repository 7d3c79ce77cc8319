from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over 'os' and 'os.path' used by the discovery services:
path canonicalization, parent resolution and directory listing. Keeps the
platform-specific edge cases (filesystem roots, broken links, invalid
path strings) out of the search algorithms.
"""

import logging
import os
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def canonicalize_path(path: PathLike) -> Optional[str]:
    """
    Resolve a path to its absolute, symlink-free form.

    The path must exist. Relative segments ('.', '..') and symbolic links
    are resolved against the current working directory.

    Args:
        path: Raw input path.

    Returns:
        Optional[str]: Canonical absolute path, or None if resolution fails.
    """
    try:
        return os.path.realpath(os.fspath(path), strict=True)
    except (OSError, ValueError) as e:
        logger.debug(f"Cannot canonicalize '{path}': {e}")
        return None


def parent_dir(path: PathLike) -> Optional[str]:
    """
    Return the directory that contains 'path'.

    Args:
        path: Directory or file path.

    Returns:
        Optional[str]: Parent directory, or None when 'path' is a filesystem
                       root or a bare relative name without a parent.
    """
    p = os.fspath(path)
    parent = os.path.dirname(p)
    if not parent or parent == p:
        return None
    return parent


def is_filesystem_root(path: PathLike) -> bool:
    """Return True if 'path' is the root of its filesystem (or drive)."""
    p = os.fspath(path)
    return os.path.dirname(p) == p

# -----------------------------------------------------------------------------
# DIRECTORY LISTING API
# -----------------------------------------------------------------------------

def list_directory(path: PathLike) -> List[os.DirEntry]:
    """
    Read the immediate entries of a directory.

    The handle is closed before returning, so the entries stay valid while
    the caller mutates its own work-list.

    Args:
        path: Directory to list.

    Returns:
        List[os.DirEntry]: Entries in the order reported by the OS.

    Raises:
        OSError: If the directory cannot be opened or read.
    """
    with os.scandir(path) as it:
        return list(it)
