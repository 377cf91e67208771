"""
Library identifier resolution.
"""

from .identifier import LibraryIdentifier, parse_library_identifier
from .resolver import LibraryResolution, LibraryResolver

__all__ = [
    "LibraryIdentifier",
    "LibraryResolution",
    "LibraryResolver",
    "parse_library_identifier",
]
