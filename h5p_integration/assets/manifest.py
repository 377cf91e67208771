"""
Asset Manifest Builder.

Produces the ordered script/style URLs a runtime bundle needs.

Ordering:
    core scripts -> editor scripts -> translation
    core styles  -> editor styles

Each URL is "<prefix><file><suffix>" where suffix is "?<cache buster>" or
empty when no cache buster is configured. Missing files are not checked;
only the translation file is probed, and it falls back to English.

Usage:
    manifest = build_manifest(
        CORE_SCRIPTS, CORE_STYLES, EDITOR_SCRIPTS, EDITOR_STYLES,
        EXCLUDED_EDITOR_SCRIPTS,
        "/vendor/h5p/h5p-core/", "/vendor/h5p/h5p-editor/",
        "v42",
    )

    builder = AssetManifestBuilder.from_settings(settings, asset_store.exists)
    manifest = builder.editor_manifest("es")
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Callable, Collection, Iterable

from pydantic import BaseModel, Field

from . import bundles

if TYPE_CHECKING:
    from h5p_integration.config import AppSettings

logger = logging.getLogger(__name__)

FileExists = Callable[[str], bool]

LANGUAGE_CODE = re.compile(r"[A-Za-z0-9]+(?:[-_][A-Za-z0-9]+)*")


class AssetManifest(BaseModel):
    """Ordered asset URLs for one runtime bundle."""

    scripts: tuple[str, ...] = Field(default_factory=tuple)
    styles: tuple[str, ...] = Field(default_factory=tuple)

    class Config:
        frozen = True


def cache_buster_suffix(token: str | None) -> str:
    """Query-string suffix for a cache buster token."""
    return f"?{token}" if token else ""


def get_assets(
    collection: Iterable[str],
    prefix: str,
    cache_buster: str | None,
    exclusions: Collection[str] | None = None,
) -> list[str]:
    """
    Build URLs for a collection of asset files.

    Args:
        collection: File names relative to prefix, in load order
        prefix: URL prefix for the bundle
        cache_buster: Cache buster token (without "?")
        exclusions: File names to skip

    Returns:
        URLs in input order
    """
    suffix = cache_buster_suffix(cache_buster)
    return [
        f"{prefix}{item}{suffix}"
        for item in collection
        if not (exclusions and item in exclusions)
    ]


def build_manifest(
    core_scripts: Iterable[str],
    core_styles: Iterable[str],
    editor_scripts: Iterable[str],
    editor_styles: Iterable[str],
    excluded_editor_scripts: Collection[str] | None,
    core_prefix: str,
    editor_prefix: str,
    cache_buster: str | None,
) -> AssetManifest:
    """Core assets first, then editor assets, minus excluded editor scripts."""
    return AssetManifest(
        scripts=(
            *get_assets(core_scripts, core_prefix, cache_buster),
            *get_assets(editor_scripts, editor_prefix, cache_buster, excluded_editor_scripts),
        ),
        styles=(
            *get_assets(core_styles, core_prefix, cache_buster),
            *get_assets(editor_styles, editor_prefix, cache_buster),
        ),
    )


def resolve_translation(
    language: str,
    translation_dir: str,
    cache_buster: str | None,
    file_exists: FileExists,
) -> str:
    """
    URL of the editor translation file for a language.

    Falls back to English when the language file does not exist or the
    language code is not a plain locale tag.
    """
    suffix = cache_buster_suffix(cache_buster)
    directory = translation_dir.rstrip("/")

    if language and LANGUAGE_CODE.fullmatch(language):
        chosen = f"{directory}/{language}.js"
        if file_exists(chosen):
            return f"{chosen}{suffix}"
        logger.debug(f"[assets] No translation for '{language}', using {bundles.FALLBACK_LANGUAGE}")
    else:
        logger.warning(f"[assets] Ignoring invalid language code: {language!r}")

    return f"{directory}/{bundles.FALLBACK_LANGUAGE}.js{suffix}"


class AssetManifestBuilder:
    """
    Holds the configured bundles and builds manifests per request.

    The builder reads nothing but its constructor arguments and the
    file_exists collaborator, so one instance can serve every request.
    """

    def __init__(
        self,
        *,
        core_prefix: str,
        editor_prefix: str,
        file_exists: FileExists,
        cache_buster: Callable[[], str] = lambda: "",
        core_scripts: Iterable[str] = bundles.CORE_SCRIPTS,
        core_styles: Iterable[str] = bundles.CORE_STYLES,
        editor_scripts: Iterable[str] = bundles.EDITOR_SCRIPTS,
        editor_styles: Iterable[str] = bundles.EDITOR_STYLES,
        excluded_editor_scripts: Collection[str] = bundles.EXCLUDED_EDITOR_SCRIPTS,
    ):
        """
        Initialize builder.

        Args:
            core_prefix: URL prefix of the core bundle
            editor_prefix: URL prefix of the editor bundle
            file_exists: Probes the asset store for a URL path
            cache_buster: Returns the current cache buster token
        """
        self.core_prefix = core_prefix
        self.editor_prefix = editor_prefix
        self._file_exists = file_exists
        self._cache_buster = cache_buster
        self._core_scripts = tuple(core_scripts)
        self._core_styles = tuple(core_styles)
        self._editor_scripts = tuple(editor_scripts)
        self._editor_styles = tuple(editor_styles)
        self._excluded = frozenset(excluded_editor_scripts)

    @classmethod
    def from_settings(cls, settings: AppSettings, file_exists: FileExists) -> AssetManifestBuilder:
        return cls(
            core_prefix=settings.url(settings.core_path),
            editor_prefix=settings.url(settings.editor_path),
            file_exists=file_exists,
            cache_buster=lambda: settings.cache_buster,
        )

    @property
    def translation_dir(self) -> str:
        return f"{self.editor_prefix}{bundles.TRANSLATION_FOLDER}"

    def core_manifest(self) -> AssetManifest:
        """Core runtime assets, as loaded by the embed page."""
        token = self._cache_buster()
        return AssetManifest(
            scripts=tuple(get_assets(self._core_scripts, self.core_prefix, token)),
            styles=tuple(get_assets(self._core_styles, self.core_prefix, token)),
        )

    def editor_manifest(self, language: str) -> AssetManifest:
        """Core + editor assets with the editor translation as the last script."""
        token = self._cache_buster()
        manifest = build_manifest(
            self._core_scripts,
            self._core_styles,
            self._editor_scripts,
            self._editor_styles,
            self._excluded,
            self.core_prefix,
            self.editor_prefix,
            token,
        )
        translation = resolve_translation(language, self.translation_dir, token, self._file_exists)

        logger.debug(
            f"[assets] Editor manifest | scripts={len(manifest.scripts) + 1} | "
            f"styles={len(manifest.styles)} | translation={translation}"
        )
        return AssetManifest(scripts=(*manifest.scripts, translation), styles=manifest.styles)

    def resizer_url(self) -> str:
        """URL of the iframe resizer script, without cache buster."""
        return f"{self.core_prefix}{bundles.RESIZER_SCRIPT}"
