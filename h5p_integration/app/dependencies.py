"""
Dependency Injection for the H5P integration service.

The dependency graph (settings, registries, asset builder, token issuer,
synthesizer) is built once per process and handed to request handlers
through FastAPI's Depends().

Storage selection:
    If H5P_DATA_DIR exists, records are read from files there
    (FileLibraryRegistry / FileContentStore). Otherwise empty in-memory
    stores are used, which is what the tests start from.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from h5p_integration.assets import AssetManifestBuilder, LocalAssetStore
from h5p_integration.config import ApiVersion, AppSettings
from h5p_integration.integration import HmacTokenGenerator, IntegrationSynthesizer
from h5p_integration.library import LibraryResolver
from h5p_integration.storage import (
    ContentStore,
    FileContentStore,
    FileLibraryRegistry,
    LibraryRegistry,
    MemoryContentStore,
    MemoryLibraryRegistry,
)

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get application settings from environment.

    Uses lru_cache for singleton pattern.
    """
    return AppSettings(
        # Service
        service_name=os.getenv("H5P_SERVICE_NAME", "h5p-integration"),
        environment=os.getenv("H5P_ENVIRONMENT", "development"),
        debug=_env_flag("H5P_DEBUG"),
        # URLs
        site_url=os.getenv("H5P_SITE_URL", "http://localhost:8000"),
        base_path=os.getenv("H5P_BASE_PATH", "/"),
        files_url=os.getenv("H5P_FILES_URL", "/sites/default/files"),
        h5p_path=os.getenv("H5P_DEFAULT_PATH", "h5p"),
        # Assets
        asset_root=os.getenv("H5P_ASSET_ROOT", "."),
        cache_buster=os.getenv("H5P_CACHE_BUSTER", ""),
        # Features
        export_enabled=_env_flag("H5P_EXPORT"),
        default_language=os.getenv("H5P_DEFAULT_LANGUAGE", "en"),
        api_version=ApiVersion(
            major_version=int(os.getenv("H5P_API_MAJOR_VERSION", "1")),
            minor_version=int(os.getenv("H5P_API_MINOR_VERSION", "12")),
        ),
        # Storage
        data_dir=os.getenv("H5P_DATA_DIR", "data"),
        # Security
        token_secret=os.getenv("H5P_TOKEN_SECRET", ""),
        token_lifetime=int(os.getenv("H5P_TOKEN_LIFETIME", "86400")),
    )


# Global instances (initialized on first access)
_libraries: Optional[LibraryRegistry] = None
_contents: Optional[ContentStore] = None
_synthesizer: Optional[IntegrationSynthesizer] = None


def get_library_registry() -> LibraryRegistry:
    global _libraries
    if _libraries is None:
        data_dir = Path(get_settings().data_dir)
        if data_dir.exists():
            logger.info(f"[storage] Using FileLibraryRegistry: {data_dir}")
            _libraries = FileLibraryRegistry(data_dir)
        else:
            logger.info("[storage] Using MemoryLibraryRegistry (no data dir found)")
            _libraries = MemoryLibraryRegistry()
    return _libraries


def get_content_store() -> ContentStore:
    global _contents
    if _contents is None:
        data_dir = Path(get_settings().data_dir)
        if data_dir.exists():
            logger.info(f"[storage] Using FileContentStore: {data_dir}")
            _contents = FileContentStore(data_dir)
        else:
            logger.info("[storage] Using MemoryContentStore (no data dir found)")
            _contents = MemoryContentStore()
    return _contents


def get_resolver() -> LibraryResolver:
    """Library resolver bound to the configured registry."""
    return LibraryResolver(get_library_registry().get_library_id)


def get_synthesizer() -> IntegrationSynthesizer:
    """
    Get the integration settings synthesizer.

    Creates it, with all of its collaborators, on first call.
    """
    global _synthesizer
    if _synthesizer is None:
        settings = get_settings()
        asset_store = LocalAssetStore(settings.asset_root, url_prefix=settings.base_path)

        _synthesizer = IntegrationSynthesizer(
            settings=settings,
            libraries=get_library_registry(),
            contents=get_content_store(),
            assets=AssetManifestBuilder.from_settings(settings, asset_store.exists),
            token_generator=HmacTokenGenerator(
                settings.token_secret.get_secret_value(),
                lifetime=settings.token_lifetime,
            ),
        )
        logger.info("[synthesizer] IntegrationSynthesizer initialized")
    return _synthesizer


def initialize_services() -> None:
    """
    Build the dependency graph on application startup.

    Called from FastAPI lifespan.
    """
    get_synthesizer()


def shutdown_services() -> None:
    """
    Drop the dependency graph on application shutdown.

    Called from FastAPI lifespan.
    """
    global _libraries, _contents, _synthesizer
    _libraries = None
    _contents = None
    _synthesizer = None
