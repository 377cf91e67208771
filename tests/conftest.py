"""
Pytest configuration and fixtures for H5P integration tests.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to path for imports
# This allows `from h5p_integration.library import ...` to work
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from h5p_integration.assets import AssetManifestBuilder, LocalAssetStore  # noqa: E402
from h5p_integration.config import AppSettings  # noqa: E402
from h5p_integration.integration import HmacTokenGenerator, IntegrationSynthesizer  # noqa: E402
from h5p_integration.storage import (  # noqa: E402
    ContentRecord,
    LibraryRecord,
    MemoryContentStore,
    MemoryLibraryRegistry,
)


@pytest.fixture
def asset_root(tmp_path):
    """Asset tree with a Spanish editor translation and the English fallback."""
    language_dir = tmp_path / "vendor" / "h5p" / "h5p-editor" / "language"
    language_dir.mkdir(parents=True)
    (language_dir / "en.js").write_text("H5PEditor.language = {};")
    (language_dir / "es.js").write_text("H5PEditor.language = {};")
    return tmp_path


@pytest.fixture
def settings(asset_root):
    """Settings pointing at the temporary asset tree."""
    return AppSettings(
        site_url="https://example.org",
        base_path="/",
        files_url="/sites/default/files",
        h5p_path="h5p",
        asset_root=str(asset_root),
        cache_buster="v42",
        token_secret="test-secret",
    )


@pytest.fixture
def multichoice_library():
    return LibraryRecord(
        library_id=1,
        machine_name="H5P.MultiChoice",
        major_version=1,
        minor_version=9,
        embed_types="div, iframe",
        supports_fullscreen="1",
    )


@pytest.fixture
def sample_content():
    return ContentRecord(
        id=42,
        library_id=1,
        parameters='{"question": "2 + 2 = ?", "answers": [{"text": "4", "correct": true}]}',
        disabled_features=0,
        title="Arithmetic quiz",
    )


@pytest.fixture
def libraries(multichoice_library):
    return MemoryLibraryRegistry([multichoice_library])


@pytest.fixture
def contents(sample_content):
    return MemoryContentStore([sample_content])


@pytest.fixture
def asset_builder(settings, asset_root):
    store = LocalAssetStore(asset_root, url_prefix="/")
    return AssetManifestBuilder.from_settings(settings, store.exists)


@pytest.fixture
def synthesizer(settings, libraries, contents, asset_builder):
    return IntegrationSynthesizer(
        settings=settings,
        libraries=libraries,
        contents=contents,
        assets=asset_builder,
        token_generator=HmacTokenGenerator("test-secret", clock=lambda: 1_700_000_000.0),
    )
