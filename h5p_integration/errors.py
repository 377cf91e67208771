"""
Exceptions for the H5P integration layer.

Hierarchy:
    H5PIntegrationError
    ├── MalformedIdentifierError   (library string does not parse)
    ├── LibraryNotFoundError       (stored content references a missing library)
    ├── ContentNotFoundError       (no content record for the requested id)
    ├── ParameterFilterError       (content parameters cannot be filtered)
    └── EmbedRenderError           (integration payload cannot be serialized)

A library *lookup* that finds nothing is not an exception: the resolver
returns a not-found LibraryResolution and callers decide what to do with it.
"""

from __future__ import annotations


class H5PIntegrationError(Exception):
    """Base exception for integration errors."""

    def __init__(self, message: str, *, detail: str | None = None):
        super().__init__(message)
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.args[0]} ({self.detail})"
        return self.args[0]


class MalformedIdentifierError(H5PIntegrationError, ValueError):
    """Raised when a library string is not of the form '<name> <major>.<minor>'."""

    def __init__(self, identifier: str):
        super().__init__(
            f"Malformed library identifier: {identifier!r}",
            detail="expected '<machineName> <major>.<minor>'",
        )
        self.identifier = identifier


class LibraryNotFoundError(H5PIntegrationError):
    """Raised when a library record required to build settings is missing."""

    def __init__(self, library_id: int):
        super().__init__(f"Library {library_id} not found")
        self.library_id = library_id


class ContentNotFoundError(H5PIntegrationError):
    """Raised when no content record exists for the requested id."""

    def __init__(self, content_id: int):
        super().__init__(f"Content {content_id} not found")
        self.content_id = content_id


class ParameterFilterError(H5PIntegrationError):
    """Raised when content parameters cannot be filtered."""

    def __init__(self, content_id: int, reason: str):
        super().__init__(f"Could not filter parameters for content {content_id}", detail=reason)
        self.content_id = content_id


class EmbedRenderError(H5PIntegrationError):
    """Raised when the embed page cannot be produced."""

    pass
