"""
H5P Integration Storage Layer.

Narrow read-only access to library and content records. The host platform
owns these rows; this package only defines the contracts and the development
and test backends.
"""

from .base import ContentStore, LibraryLookup, LibraryRegistry
from .loaders import (
    FileContentStore,
    FileLibraryRegistry,
    MemoryContentStore,
    MemoryLibraryRegistry,
)
from .schemas import ContentRecord, LibraryRecord

__all__ = [
    "ContentRecord",
    "ContentStore",
    "FileContentStore",
    "FileLibraryRegistry",
    "LibraryLookup",
    "LibraryRecord",
    "LibraryRegistry",
    "MemoryContentStore",
    "MemoryLibraryRegistry",
]
