"""
Integration settings synthesis.

Produces the ContentView (player) and EditorView (editor) payloads.
"""

from .collaborators import (
    DisabledFeature,
    HmacTokenGenerator,
    JsonParameterFilter,
    decode_display_options,
)
from .content import build_content_settings, get_export_url, is_div_embeddable
from .editor import build_editor_settings, get_files_path
from .schemas import ContentView, DisplayOptions, EditorView, FileIcon, ViewKind
from .semantics import COPYRIGHT_SEMANTICS
from .synthesizer import IntegrationSynthesizer

__all__ = [
    "COPYRIGHT_SEMANTICS",
    "ContentView",
    "DisabledFeature",
    "DisplayOptions",
    "EditorView",
    "FileIcon",
    "HmacTokenGenerator",
    "IntegrationSynthesizer",
    "JsonParameterFilter",
    "ViewKind",
    "build_content_settings",
    "build_editor_settings",
    "decode_display_options",
    "get_export_url",
    "get_files_path",
    "is_div_embeddable",
]
