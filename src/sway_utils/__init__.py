"""sway_utils – file tree discovery helpers for Sway projects."""

from importlib import metadata

from sway_utils.core.services.collector import get_sway_files, is_sway_file
from sway_utils.core.services.locator import (
    find_nested_dir_with_file,
    find_nested_manifest_dir,
    find_parent_dir_with_file,
    find_parent_manifest_dir,
    find_parent_manifest_dir_with_check,
)
from sway_utils.domain.constants import MANIFEST_FILE_NAME, SWAY_EXTENSION
from sway_utils.domain.discovery_models import DiscoveryError
from sway_utils.utils.prefixes import PrefixSequence, iter_prefixes

try:
    __version__ = metadata.version("sway-utils")
except metadata.PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0"

__all__ = [
    "MANIFEST_FILE_NAME",
    "SWAY_EXTENSION",
    "DiscoveryError",
    "PrefixSequence",
    "find_nested_dir_with_file",
    "find_nested_manifest_dir",
    "find_parent_dir_with_file",
    "find_parent_manifest_dir",
    "find_parent_manifest_dir_with_check",
    "get_sway_files",
    "is_sway_file",
    "iter_prefixes",
]
