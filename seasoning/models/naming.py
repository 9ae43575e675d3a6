"""Models for the naming strategies."""

from enum import Enum


class NamingMode(str, Enum):
    """Supported renaming strategies."""

    HASH = "hash"  # Keyed hash of the original name
    MINIMAL = "minimal"  # Shortest sequential names: a, b, ..., z, aa, ab
    DEBUG = "debug"  # Original name kept legible between symbol/prefix/suffix
