"""
Asset manifest assembly.
"""

from .manifest import (
    AssetManifest,
    AssetManifestBuilder,
    build_manifest,
    cache_buster_suffix,
    get_assets,
    resolve_translation,
)
from .store import LocalAssetStore

__all__ = [
    "AssetManifest",
    "AssetManifestBuilder",
    "LocalAssetStore",
    "build_manifest",
    "cache_buster_suffix",
    "get_assets",
    "resolve_translation",
]
