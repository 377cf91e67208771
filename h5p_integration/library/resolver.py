"""
Library Resolver.

Turns a library string ("H5P.MultiChoice 1.9") into the numeric id the
library registry stores.

Design Principle:
    The resolver does not know WHERE libraries are stored. It is given a
    lookup callable at construction time and calls it once per resolution.

Flow:
    1. parse_library_identifier(text) -> LibraryIdentifier
       (raises MalformedIdentifierError on bad input)
    2. lookup(machine_name, major, minor) -> id | None
    3. LibraryResolution(identifier, library_id)
       (library_id is None when the library is not installed)

Usage:
    registry = MemoryLibraryRegistry([...])
    resolver = LibraryResolver(registry.get_library_id)

    resolution = resolver.resolve("H5P.MultiChoice 1.9")
    if not resolution.found:
        ...

    # Parse only, no lookup round-trip
    identifier = resolver.parse("H5P.MultiChoice 1.9")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .identifier import LibraryIdentifier, parse_library_identifier

if TYPE_CHECKING:
    from h5p_integration.storage.base import LibraryLookup

logger = logging.getLogger(__name__)

IDENTIFIER_PROPERTIES = ("machineName", "majorVersion", "minorVersion")


@dataclass(frozen=True)
class LibraryResolution:
    """
    Result of resolving a library string.

    Attributes:
        identifier: The parsed identifier
        library_id: Registry id, or None if the library is not installed
    """

    identifier: LibraryIdentifier
    library_id: int | None = None

    @property
    def found(self) -> bool:
        return self.library_id is not None

    def to_dict(self) -> dict[str, Any]:
        return {**self.identifier.to_dict(), "libraryId": self.library_id}


class LibraryResolver:
    """
    Resolves library strings against an injected lookup.

    The resolver is stateless; it may be shared across requests.

    Example:
        resolver = LibraryResolver(registry.get_library_id)

        resolver.resolve("H5P.MultiChoice 1.9").library_id
        resolver.get_library_property("H5P.MultiChoice 1.9", "majorVersion")
    """

    def __init__(self, lookup: LibraryLookup):
        """
        Initialize resolver.

        Args:
            lookup: (machine_name, major, minor) -> library id | None
        """
        self._lookup = lookup

    def parse(self, text: str) -> LibraryIdentifier:
        """Parse a library string without looking it up."""
        return parse_library_identifier(text)

    def resolve(self, text: str) -> LibraryResolution:
        """
        Parse a library string and look up its id.

        Args:
            text: Library string, e.g. "H5P.MultiChoice 1.9"

        Returns:
            LibraryResolution, with library_id None if not installed

        Raises:
            MalformedIdentifierError: If the string does not parse
        """
        identifier = parse_library_identifier(text)
        library_id = self._lookup(
            identifier.machine_name,
            identifier.major_version,
            identifier.minor_version,
        )

        if library_id is None:
            logger.info(f"[resolver] Library not installed: {identifier}")
        else:
            logger.debug(f"[resolver] Resolved {identifier} -> {library_id}")

        return LibraryResolution(identifier=identifier, library_id=library_id)

    def get_library_property(self, text: str, prop: str = "all") -> Any:
        """
        Extract library information from a library string.

        Args:
            text: Library string with version, e.g. "H5P.MultiChoice 1.9"
            prop: "all", "libraryId", "machineName", "majorVersion"
                or "minorVersion"

        Returns:
            A dict with every property for "all", otherwise the single value

        Raises:
            MalformedIdentifierError: If the string does not parse
            KeyError: If prop is not a known property
        """
        if prop == "all":
            return self.resolve(text).to_dict()
        if prop == "libraryId":
            return self.resolve(text).library_id
        if prop not in IDENTIFIER_PROPERTIES:
            raise KeyError(prop)
        return self.parse(text).to_dict()[prop]
