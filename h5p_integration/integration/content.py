"""
Content view settings.

Builds the player payload for one stored content. Parameter filtering and
display-option decoding are delegated to collaborators; this module only
combines their output with the library record and the embed URLs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .schemas import ContentView

if TYPE_CHECKING:
    from h5p_integration.storage.schemas import ContentRecord, LibraryRecord

    from .collaborators import DisplayOptionsFn, ParameterFilter

logger = logging.getLogger(__name__)

EXPORT_FOLDER = "exports"
EXPORT_SLUG = "interactive-content"

EMBED_TEMPLATE = (
    '<iframe src="{url}" width=":w" height=":h" frameborder="0" '
    'allowfullscreen="allowfullscreen"></iframe>'
)
RESIZE_TEMPLATE = '<script src="{url}" charset="UTF-8"></script>'


def is_div_embeddable(library: LibraryRecord) -> bool:
    """Whether content of this library can be rendered in a <div>."""
    return "iframe" not in library.embed_types


def get_export_url(content_id: int, export_enabled: bool, export_base_path: str | None) -> str:
    """URL of the exported .h5p package, or "" when export is unavailable."""
    if not export_enabled:
        return ""
    if not export_base_path:
        logger.warning("[synthesizer] Export enabled without an export path, hiding export")
        return ""
    return f"{export_base_path.rstrip('/')}/{EXPORT_FOLDER}/{EXPORT_SLUG}-{content_id}.h5p"


def embed_code(embed_url: str) -> str:
    # :w and :h are substituted by the client
    return EMBED_TEMPLATE.format(url=embed_url)


def resize_code(resizer_url: str) -> str:
    return RESIZE_TEMPLATE.format(url=resizer_url)


def build_content_settings(
    content: ContentRecord,
    library: LibraryRecord,
    filter_parameters: ParameterFilter,
    get_display_options: DisplayOptionsFn,
    export_enabled: bool,
    export_base_path: str | None,
    *,
    embed_url: str,
    resizer_url: str,
) -> ContentView:
    """
    Build the player settings for a content.

    Args:
        content: Stored content record
        library: Library the content instantiates
        filter_parameters: Content validation engine, called on every build
        get_display_options: Decodes content.disabled_features
        export_enabled: Whether .h5p export is switched on
        export_base_path: Public URL of the H5P files folder
        embed_url: Absolute URL of the standalone embed page
        resizer_url: Absolute URL of the iframe resizer script

    Returns:
        ContentView
    """
    return ContentView(
        library_name=library.library_string,
        json_content=filter_parameters(content),
        full_screen=library.supports_fullscreen,
        export_url=get_export_url(content.id, export_enabled, export_base_path),
        embed_code=embed_code(embed_url),
        resize_code=resize_code(resizer_url),
        url=embed_url,
        title=content.title,
        display_options=get_display_options(content.disabled_features),
    )
