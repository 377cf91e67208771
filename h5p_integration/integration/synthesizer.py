"""
Integration Settings Synthesizer.

Combines stored records, collaborators and asset manifests into the payload
the client runtime consumes.

Design Principle:
    The dependency graph (registries, filter, token issuer, asset builder)
    is built once at process start and handed to the synthesizer. Request
    handlers call build() with the view kind they need; nothing is cached
    between calls.

Flow (content view):
    1. ContentStore.get_content(id)           -> ContentRecord
    2. LibraryRegistry.get_library(lib_id)    -> LibraryRecord
    3. build_content_settings(...)            -> ContentView

Flow (editor view):
    1. AssetManifestBuilder.editor_manifest(language)
    2. build_editor_settings(...)             -> EditorView

Usage:
    synthesizer = IntegrationSynthesizer(
        settings=settings,
        libraries=FileLibraryRegistry("data/"),
        contents=FileContentStore("data/"),
        assets=AssetManifestBuilder.from_settings(settings, store.exists),
        token_generator=HmacTokenGenerator(secret),
    )

    view = synthesizer.build(ViewKind.CONTENT, content_id=42)
    editor = synthesizer.build(ViewKind.EDITOR, content_id=0, language="es")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from h5p_integration.errors import ContentNotFoundError, LibraryNotFoundError

from .collaborators import JsonParameterFilter, decode_display_options
from .content import build_content_settings, is_div_embeddable
from .editor import build_editor_settings
from .schemas import ContentView, EditorView, ViewKind
from .semantics import COPYRIGHT_SEMANTICS

if TYPE_CHECKING:
    from h5p_integration.assets import AssetManifestBuilder
    from h5p_integration.config import AppSettings
    from h5p_integration.storage.base import ContentStore, LibraryRegistry
    from h5p_integration.storage.schemas import ContentRecord, LibraryRecord

    from .collaborators import DisplayOptionsFn, ParameterFilter, TokenGenerator

logger = logging.getLogger(__name__)


class IntegrationSynthesizer:
    """
    Builds content and editor payloads from injected collaborators.

    Stateless after construction; safe to share across requests.
    """

    def __init__(
        self,
        *,
        settings: AppSettings,
        libraries: LibraryRegistry,
        contents: ContentStore,
        assets: AssetManifestBuilder,
        token_generator: TokenGenerator,
        filter_parameters: ParameterFilter | None = None,
        get_display_options: DisplayOptionsFn | None = None,
        copyright_semantics: dict[str, Any] | None = None,
    ):
        """
        Initialize synthesizer.

        Args:
            settings: Application settings (paths, export switch, API version)
            libraries: Library registry
            contents: Content store
            assets: Asset manifest builder
            token_generator: Issues editor AJAX tokens
            filter_parameters: Content validation engine (default: JsonParameterFilter)
            get_display_options: Bitmask decoder (default: decode_display_options)
            copyright_semantics: Editor copyright form (default: COPYRIGHT_SEMANTICS)
        """
        self._settings = settings
        self._libraries = libraries
        self._contents = contents
        self._assets = assets
        self._token_generator = token_generator
        self._filter_parameters = filter_parameters or JsonParameterFilter()
        self._get_display_options = get_display_options or decode_display_options
        self._copyright_semantics = (
            copyright_semantics if copyright_semantics is not None else COPYRIGHT_SEMANTICS
        )

    @property
    def assets(self) -> AssetManifestBuilder:
        return self._assets

    # ==================== Records ====================

    def load_content(self, content_id: int) -> ContentRecord:
        content = self._contents.get_content(content_id)
        if content is None:
            raise ContentNotFoundError(content_id)
        return content

    def load_library(self, content: ContentRecord) -> LibraryRecord:
        library = self._libraries.get_library(content.library_id)
        if library is None:
            raise LibraryNotFoundError(content.library_id)
        return library

    # ==================== Views ====================

    def embed_url(self, content_id: int) -> str:
        return self._settings.absolute_url(f"h5p/embed/{content_id}")

    def resizer_url(self) -> str:
        return f"{self._settings.site_url.rstrip('/')}{self._assets.resizer_url()}"

    def content_settings(self, content_id: int) -> ContentView:
        """
        Player settings for a stored content.

        Raises:
            ContentNotFoundError: If the content does not exist
            LibraryNotFoundError: If its library is not installed
        """
        content = self.load_content(content_id)
        library = self.load_library(content)

        view = build_content_settings(
            content,
            library,
            self._filter_parameters,
            self._get_display_options,
            self._settings.export_enabled,
            self._settings.h5p_files_path,
            embed_url=self.embed_url(content.id),
            resizer_url=self.resizer_url(),
        )

        logger.info(
            f"[synthesizer] Content settings | "
            f"content={content.id} | "
            f"library={view.library_name} | "
            f"div_embeddable={is_div_embeddable(library)}"
        )
        return view

    def editor_settings(self, content_id: int = 0, language: str | None = None) -> EditorView:
        """Editor settings for new (id 0) or existing content."""
        settings = self._settings
        manifest = self._assets.editor_manifest(language or settings.default_language)

        view = build_editor_settings(
            content_id,
            settings.h5p_files_path,
            self._token_generator,
            settings.api_version,
            manifest,
            self._copyright_semantics,
            ajax_prefix=settings.base_path,
            file_icon_path=settings.url(f"{settings.editor_path}images/binary-file.png"),
            module_path=settings.module_path,
            library_path=settings.library_path,
        )

        logger.info(f"[synthesizer] Editor settings | content={content_id} | files={view.files_path}")
        return view

    def build(
        self,
        kind: ViewKind,
        *,
        content_id: int = 0,
        language: str | None = None,
    ) -> ContentView | EditorView:
        """Build the payload for one view kind."""
        if kind is ViewKind.CONTENT:
            return self.content_settings(content_id)
        if kind is ViewKind.EDITOR:
            return self.editor_settings(content_id, language)
        raise ValueError(f"Unknown view kind: {kind!r}")

    # ==================== Embed ====================

    def embed_integration(self, content_id: int) -> tuple[ContentView, dict[str, Any]]:
        """
        Player settings plus the page-level integration object for the
        standalone embed page.

        Returns:
            (ContentView, integration dict keyed the way the runtime reads it)
        """
        view = self.content_settings(content_id)
        integration = {
            "url": self._settings.h5p_files_path,
            "contents": {f"cid-{content_id}": view.to_client()},
        }
        return view, integration
