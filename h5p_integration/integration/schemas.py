"""
Integration Payload Schemas.

The two settings objects handed to the client runtime. Field names are
snake_case in Python and camelCase on the wire; serialize with
``payload.to_client()`` (or ``model_dump(by_alias=True)``).

    ContentView  - what the player needs to render one content
    EditorView   - what the editor needs to create/edit content

Exactly one of them is produced per request, selected by ViewKind.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from h5p_integration.assets import AssetManifest
from h5p_integration.config import ApiVersion


class ViewKind(str, Enum):
    """Which payload the caller needs."""

    CONTENT = "content"
    EDITOR = "editor"


class _ClientModel(BaseModel):
    class Config:
        frozen = True
        populate_by_name = True

    def to_client(self) -> dict[str, Any]:
        """JSON-compatible dict with the runtime's key names."""
        return self.model_dump(mode="json", by_alias=True)


class DisplayOptions(_ClientModel):
    """Which chrome the player shows around content."""

    frame: bool = True
    export: bool = True
    embed: bool = True
    copyright: bool = True
    icon: bool = True


class ContentView(_ClientModel):
    """Player settings for one content."""

    library_name: str = Field(..., alias="libraryName")
    json_content: str = Field(..., alias="jsonContent")
    full_screen: bool = Field(False, alias="fullScreen")
    export_url: str = Field("", alias="exportUrl")
    embed_code: str = Field(..., alias="embedCode")
    resize_code: str = Field(..., alias="resizeCode")
    url: str
    title: str = ""
    display_options: DisplayOptions = Field(default_factory=DisplayOptions, alias="displayOptions")


class FileIcon(_ClientModel):
    path: str
    width: int = 50
    height: int = 50


class EditorView(_ClientModel):
    """Editor settings for new or existing content."""

    files_path: str = Field(..., alias="filesPath")
    file_icon: FileIcon = Field(..., alias="fileIcon")
    ajax_path: str = Field(..., alias="ajaxPath")
    module_path: str = Field("", alias="modulePath")
    library_path: str = Field(..., alias="libraryPath")
    copyright_semantics: dict[str, Any] = Field(default_factory=dict, alias="copyrightSemantics")
    assets: AssetManifest
    content_rel_url: str = Field(..., alias="contentRelUrl")
    editor_rel_url: str = Field(..., alias="editorRelUrl")
    api_version: ApiVersion = Field(..., alias="apiVersion")
