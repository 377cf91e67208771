"""
Editor view settings.

The only content-dependent part of the editor payload is where uploaded
files go: new content (id 0) uses the editor scratch folder, existing content
uses its own folder. The AJAX path carries a token from the injected
generator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .schemas import EditorView, FileIcon

if TYPE_CHECKING:
    from h5p_integration.assets import AssetManifest
    from h5p_integration.config import ApiVersion

    from .collaborators import TokenGenerator

AJAX_OPERATION = "editorajax"


def get_files_path(content_id: int, files_base_path: str) -> str:
    """Directory for files bundled with the content being edited."""
    base = files_base_path.rstrip("/")
    if content_id:
        return f"{base}/content/{content_id}"
    return f"{base}/editor"


def get_ajax_path(content_id: int, token_generator: TokenGenerator, ajax_prefix: str = "") -> str:
    token = token_generator(AJAX_OPERATION, content_id)
    return f"{ajax_prefix.rstrip('/')}/h5peditor/{token}/{content_id}/"


def build_editor_settings(
    content_id: int,
    files_base_path: str,
    token_generator: TokenGenerator,
    api_version: ApiVersion,
    assets: AssetManifest,
    copyright_semantics: dict[str, Any],
    *,
    ajax_prefix: str = "",
    file_icon_path: str = "/vendor/h5p/h5p-editor/images/binary-file.png",
    module_path: str = "vendor/h5p",
    library_path: str = "libraries/",
    content_rel_url: str = "../h5p/content/",
    editor_rel_url: str = "../../../vendor/h5p/h5p-editor",
) -> EditorView:
    """
    Build the editor settings.

    Args:
        content_id: Content being edited, 0 for new content
        files_base_path: Public URL of the H5P files folder
        token_generator: Issues the AJAX security token
        api_version: Core API version
        assets: Editor asset manifest
        copyright_semantics: Copyright form semantics

    Returns:
        EditorView
    """
    return EditorView(
        files_path=get_files_path(content_id, files_base_path),
        file_icon=FileIcon(path=file_icon_path),
        ajax_path=get_ajax_path(content_id, token_generator, ajax_prefix),
        module_path=module_path,
        library_path=library_path,
        copyright_semantics=copyright_semantics,
        assets=assets,
        content_rel_url=content_rel_url,
        editor_rel_url=editor_rel_url,
        api_version=api_version,
    )
