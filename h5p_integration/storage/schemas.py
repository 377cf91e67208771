"""
Stored Record Schemas.

Read-only views of the rows the host platform persists for libraries and
content. The integration layer never writes these.

Both models accept the encodings the host database uses:
    - embed_types as a comma-separated string ("div, iframe")
    - fullscreen as "1"/"0"
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class LibraryRecord(BaseModel):
    """
    A library row from the library registry.

    Attributes:
        library_id: Numeric library id
        machine_name: e.g. "H5P.MultiChoice"
        major_version: Major version
        minor_version: Minor version
        embed_types: Supported embed strategies ("div", "iframe")
        supports_fullscreen: Whether the library can go fullscreen
    """

    library_id: int = Field(..., ge=0)
    machine_name: str = Field(..., min_length=1)
    major_version: int = Field(..., ge=0)
    minor_version: int = Field(..., ge=0)
    embed_types: frozenset[str] = Field(default_factory=frozenset)
    supports_fullscreen: bool = False

    class Config:
        frozen = True

    @field_validator("embed_types", mode="before")
    @classmethod
    def _split_embed_types(cls, value: Any) -> Any:
        if isinstance(value, str):
            return frozenset(part.strip() for part in value.split(",") if part.strip())
        return value

    @field_validator("supports_fullscreen", mode="before")
    @classmethod
    def _fullscreen_flag(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() == "1"
        return value

    @property
    def library_string(self) -> str:
        """'<machineName> <major>.<minor>'."""
        return f"{self.machine_name} {self.major_version}.{self.minor_version}"


class ContentRecord(BaseModel):
    """
    A stored content instance.

    Attributes:
        id: Content id
        library_id: Id of the library this content instantiates
        parameters: Raw (unsafe) serialized parameters
        filtered_parameters: Filtered parameters, "" when not yet filtered
        disabled_features: Bitmask of disabled display options
        title: Display title
    """

    id: int = Field(..., ge=0)
    library_id: int = Field(..., ge=0)
    parameters: str = Field(..., description="Raw serialized parameters")
    filtered_parameters: str = Field("", description="Safe parameters, empty if not filtered yet")
    disabled_features: int = Field(0, ge=0)
    title: str = ""

    class Config:
        frozen = True
