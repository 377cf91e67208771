"""
Storage Protocols.

The integration layer reads libraries and content through these narrow
contracts. Implementations live in loaders.py (memory, file); a database
backed implementation belongs to the host platform.

Protocols:
    - LibraryLookup: (machine_name, major, minor) -> library id | None
    - LibraryRegistry: lookup plus record access by id
    - ContentStore: content record access by id
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .schemas import ContentRecord, LibraryRecord


class LibraryLookup(Protocol):
    """Callable resolving a library triple to its numeric id."""

    def __call__(self, machine_name: str, major_version: int, minor_version: int) -> int | None:
        ...


@runtime_checkable
class LibraryRegistry(Protocol):
    """Read access to installed libraries."""

    def get_library_id(
        self,
        machine_name: str,
        major_version: int,
        minor_version: int,
    ) -> int | None:
        """
        Find the id of an installed library.

        Returns:
            Library id, or None if no such library is installed
        """
        ...

    def get_library(self, library_id: int) -> "LibraryRecord | None":
        """Get a library record by id."""
        ...


@runtime_checkable
class ContentStore(Protocol):
    """Read access to stored content."""

    def get_content(self, content_id: int) -> "ContentRecord | None":
        """Get a content record by id."""
        ...
