"""
Asset bundles shipped by the H5P core and editor libraries.

Paths are relative to the bundle's prefix (see AppSettings.core_path and
AppSettings.editor_path). Order matters: later files use globals defined by
earlier ones.
"""

from __future__ import annotations

CORE_SCRIPTS: tuple[str, ...] = (
    "js/jquery.js",
    "js/h5p.js",
    "js/h5p-event-dispatcher.js",
    "js/h5p-x-api-event.js",
    "js/h5p-x-api.js",
    "js/h5p-content-type.js",
    "js/h5p-confirmation-dialog.js",
    "js/h5p-action-bar.js",
)

CORE_STYLES: tuple[str, ...] = (
    "styles/h5p.css",
    "styles/h5p-confirmation-dialog.css",
    "styles/h5p-core-button.css",
)

EDITOR_SCRIPTS: tuple[str, ...] = (
    "scripts/h5p-hub-client.js",
    "scripts/h5peditor-editor.js",
    "scripts/h5peditor.js",
    "scripts/h5peditor-semantic-structure.js",
    "scripts/h5peditor-library-selector.js",
    "scripts/h5peditor-form.js",
    "scripts/h5peditor-text.js",
    "scripts/h5peditor-html.js",
    "scripts/h5peditor-number.js",
    "scripts/h5peditor-textarea.js",
    "scripts/h5peditor-file-uploader.js",
    "scripts/h5peditor-file.js",
    "scripts/h5peditor-image.js",
    "scripts/h5peditor-image-popup.js",
    "scripts/h5peditor-av.js",
    "scripts/h5peditor-group.js",
    "scripts/h5peditor-boolean.js",
    "scripts/h5peditor-list.js",
    "scripts/h5peditor-list-editor.js",
    "scripts/h5peditor-library.js",
    "scripts/h5peditor-library-list-cache.js",
    "scripts/h5peditor-select.js",
    "scripts/h5peditor-dimensions.js",
    "scripts/h5peditor-coordinates.js",
    "scripts/h5peditor-none.js",
    "ckeditor/ckeditor.js",
)

EDITOR_STYLES: tuple[str, ...] = (
    "libs/darkroom.css",
    "styles/css/h5p-hub-client.css",
    "styles/css/fonts.css",
    "styles/css/application.css",
    "styles/css/libs/zebra_datepicker.min.css",
)

# Loaded by the host page through its own library attachment.
EXCLUDED_EDITOR_SCRIPTS: frozenset[str] = frozenset({"scripts/h5peditor-editor.js"})

RESIZER_SCRIPT = "js/h5p-resizer.js"

TRANSLATION_FOLDER = "language"
FALLBACK_LANGUAGE = "en"
