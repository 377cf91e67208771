"""
Library identifier parsing.

A library is addressed by a human-readable string such as
``"H5P.MultiChoice 1.9"``: the machine name, a single whitespace character
and a ``major.minor`` version.

Grammar:
    The version is the *last* ``<int>.<int>`` token and everything before the
    final whitespace is the machine name. The match is greedy, so a name that
    itself ends in a version-shaped token is ambiguous:

        "H5P.Foo 1.2 3.4"  ->  name "H5P.Foo 1.2", version 3.4

    Names must avoid that shape by convention; there is no escaping.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from h5p_integration.errors import MalformedIdentifierError

LIBRARY_PATTERN = re.compile(r"(.+)\s(\d+)\.(\d+)", re.ASCII)


class LibraryIdentifier(BaseModel):
    """
    Parsed library identifier.

    Attributes:
        machine_name: Library machine name, e.g. "H5P.MultiChoice"
        major_version: Major version
        minor_version: Minor version
    """

    machine_name: str = Field(..., min_length=1)
    major_version: int = Field(..., ge=0)
    minor_version: int = Field(..., ge=0)

    class Config:
        frozen = True

    def __str__(self) -> str:
        return f"{self.machine_name} {self.major_version}.{self.minor_version}"

    def to_dict(self) -> dict[str, str | int]:
        """Key names used by the client runtime."""
        return {
            "machineName": self.machine_name,
            "majorVersion": self.major_version,
            "minorVersion": self.minor_version,
        }


def parse_library_identifier(text: str) -> LibraryIdentifier:
    """
    Parse ``"<machineName> <major>.<minor>"``.

    Args:
        text: Library string

    Returns:
        LibraryIdentifier

    Raises:
        MalformedIdentifierError: If the string does not match the grammar
    """
    match = LIBRARY_PATTERN.fullmatch(text)
    if match is None or not match.group(1).strip():
        raise MalformedIdentifierError(text)

    name, major, minor = match.groups()
    return LibraryIdentifier(
        machine_name=name,
        major_version=int(major),
        minor_version=int(minor),
    )
