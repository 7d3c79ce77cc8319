from __future__ import annotations

"""
Discovery Domain Data Models.

Defines the records exchanged between the discovery services and their
callers: skipped-directory reports and the manifest acceptance predicate.
"""

from dataclasses import dataclass
from typing import Callable

# -----------------------------------------------------------------------------
# TYPE ALIASES
# -----------------------------------------------------------------------------

# Receives a candidate manifest directory, returns True to accept it
ManifestCheck = Callable[[str], bool]

# -----------------------------------------------------------------------------
# ERROR TRACKING MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DiscoveryError:
    """
    Describes a directory that could not be listed during a scan.

    Attributes:
        path: Directory that was skipped.
        error: Descriptive exception message.
    """
    path: str
    error: str
