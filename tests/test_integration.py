"""
Tests for integration settings synthesis.

Tests for:
- build_content_settings / is_div_embeddable / get_export_url
- build_editor_settings / get_files_path
- Default collaborators (filter, display options, tokens)
- IntegrationSynthesizer
"""

import json
from unittest.mock import MagicMock

import pytest

from h5p_integration.assets import AssetManifest
from h5p_integration.config import ApiVersion
from h5p_integration.errors import (
    ContentNotFoundError,
    LibraryNotFoundError,
    ParameterFilterError,
)
from h5p_integration.integration import (
    COPYRIGHT_SEMANTICS,
    ContentView,
    DisabledFeature,
    DisplayOptions,
    EditorView,
    HmacTokenGenerator,
    JsonParameterFilter,
    ViewKind,
    build_content_settings,
    build_editor_settings,
    decode_display_options,
    get_export_url,
    get_files_path,
    is_div_embeddable,
)
from h5p_integration.storage import ContentRecord, LibraryRecord

EMBED_URL = "https://example.org/h5p/embed/42"
RESIZER_URL = "https://example.org/vendor/h5p/h5p-core/js/h5p-resizer.js"


def _library(**overrides):
    fields = {
        "library_id": 9,
        "machine_name": "H5P.Test",
        "major_version": 1,
        "minor_version": 0,
    }
    fields.update(overrides)
    return LibraryRecord(**fields)


# =============================================================================
# Content View Tests
# =============================================================================


class TestIsDivEmbeddable:
    """Tests for is_div_embeddable."""

    def test_iframe_only(self):
        assert is_div_embeddable(_library(embed_types={"iframe"})) is False

    def test_div_only(self):
        assert is_div_embeddable(_library(embed_types={"div"})) is True

    def test_empty(self):
        assert is_div_embeddable(_library()) is True

    def test_both(self):
        assert is_div_embeddable(_library(embed_types="div, iframe")) is False


class TestGetExportUrl:
    """Tests for get_export_url."""

    def test_disabled(self):
        assert get_export_url(42, False, "/files/h5p") == ""

    def test_enabled(self):
        assert get_export_url(42, True, "/files/h5p") == "/files/h5p/exports/interactive-content-42.h5p"

    def test_trailing_slash(self):
        assert get_export_url(7, True, "/files/h5p/") == "/files/h5p/exports/interactive-content-7.h5p"

    @pytest.mark.parametrize("base", ["", None])
    def test_enabled_without_path_is_empty(self, base):
        assert get_export_url(42, True, base) == ""


class TestBuildContentSettings:
    """Tests for build_content_settings."""

    def _build(self, content, library, **kwargs):
        options = {
            "filter_parameters": MagicMock(return_value='{"filtered":true}'),
            "get_display_options": MagicMock(return_value=DisplayOptions()),
            "export_enabled": False,
            "export_base_path": "/files/h5p",
        }
        options.update(kwargs)
        view = build_content_settings(
            content,
            library,
            options["filter_parameters"],
            options["get_display_options"],
            options["export_enabled"],
            options["export_base_path"],
            embed_url=EMBED_URL,
            resizer_url=RESIZER_URL,
        )
        return view, options

    def test_fields(self, sample_content, multichoice_library):
        view, _ = self._build(sample_content, multichoice_library)

        assert view.library_name == "H5P.MultiChoice 1.9"
        assert view.json_content == '{"filtered":true}'
        assert view.full_screen is True
        assert view.export_url == ""
        assert view.url == EMBED_URL
        assert view.title == "Arithmetic quiz"

    def test_filter_always_called(self, multichoice_library):
        content = ContentRecord(
            id=3,
            library_id=1,
            parameters="{}",
            filtered_parameters='{"stale":true}',
        )
        view, options = self._build(content, multichoice_library)

        options["filter_parameters"].assert_called_once_with(content)
        assert view.json_content == '{"filtered":true}'

    def test_display_options_from_bitmask(self, multichoice_library):
        content = ContentRecord(id=3, library_id=1, parameters="{}", disabled_features=6)
        view, options = self._build(
            content,
            multichoice_library,
            get_display_options=decode_display_options,
        )

        assert view.display_options.export is False
        assert view.display_options.embed is False
        assert view.display_options.frame is True

    def test_fullscreen_comes_from_library(self, sample_content):
        view, _ = self._build(sample_content, _library(supports_fullscreen="0"))
        assert view.full_screen is False

    def test_export_enabled(self, sample_content, multichoice_library):
        view, _ = self._build(sample_content, multichoice_library, export_enabled=True)
        assert view.export_url == "/files/h5p/exports/interactive-content-42.h5p"

    def test_embed_and_resize_code(self, sample_content, multichoice_library):
        view, _ = self._build(sample_content, multichoice_library)

        assert view.embed_code == (
            '<iframe src="https://example.org/h5p/embed/42" width=":w" height=":h" '
            'frameborder="0" allowfullscreen="allowfullscreen"></iframe>'
        )
        assert view.resize_code == f'<script src="{RESIZER_URL}" charset="UTF-8"></script>'

    def test_client_keys(self, sample_content, multichoice_library):
        view, _ = self._build(sample_content, multichoice_library)

        data = view.to_client()

        assert set(data) == {
            "libraryName",
            "jsonContent",
            "fullScreen",
            "exportUrl",
            "embedCode",
            "resizeCode",
            "url",
            "title",
            "displayOptions",
        }
        assert data["displayOptions"] == {
            "frame": True,
            "export": True,
            "embed": True,
            "copyright": True,
            "icon": True,
        }
        json.dumps(data)


# =============================================================================
# Editor View Tests
# =============================================================================


class TestGetFilesPath:
    """Tests for get_files_path."""

    def test_new_content_uses_editor_folder(self):
        assert get_files_path(0, "/files/h5p") == "/files/h5p/editor"

    def test_existing_content_uses_content_folder(self):
        assert get_files_path(7, "/files/h5p/") == "/files/h5p/content/7"


class TestBuildEditorSettings:
    """Tests for build_editor_settings."""

    @pytest.fixture
    def assets(self):
        return AssetManifest(scripts=("/c/a.js", "/e/language/en.js"), styles=("/c/a.css",))

    def test_new_content(self, assets):
        tokens = MagicMock(return_value="tok123")

        view = build_editor_settings(
            0, "/files/h5p", tokens, ApiVersion(), assets, COPYRIGHT_SEMANTICS
        )

        assert view.files_path == "/files/h5p/editor"
        assert view.ajax_path == "/h5peditor/tok123/0/"
        tokens.assert_called_once_with("editorajax", 0)

    def test_existing_content(self, assets):
        view = build_editor_settings(
            7,
            "/files/h5p",
            lambda operation, content_id: "abc",
            ApiVersion(major_version=1, minor_version=24),
            assets,
            COPYRIGHT_SEMANTICS,
            ajax_prefix="/drupal/",
        )

        assert view.files_path.endswith("/content/7")
        assert view.ajax_path == "/drupal/h5peditor/abc/7/"
        assert view.api_version.minor_version == 24

    def test_client_keys(self, assets):
        view = build_editor_settings(
            0, "/files/h5p", lambda *args: "t", ApiVersion(), assets, {"name": "copyright"}
        )

        data = view.to_client()

        assert data["apiVersion"] == {"majorVersion": 1, "minorVersion": 12}
        assert data["assets"] == {"scripts": ["/c/a.js", "/e/language/en.js"], "styles": ["/c/a.css"]}
        assert data["fileIcon"]["width"] == 50
        assert data["copyrightSemantics"] == {"name": "copyright"}
        assert {"filesPath", "ajaxPath", "libraryPath", "contentRelUrl", "editorRelUrl"} <= set(data)


# =============================================================================
# Collaborator Tests
# =============================================================================


class TestJsonParameterFilter:
    """Tests for JsonParameterFilter."""

    def test_compacts_parameters(self, sample_content):
        result = JsonParameterFilter()(sample_content)

        assert result == '{"question":"2 + 2 = ?","answers":[{"text":"4","correct":true}]}'

    def test_ignores_stored_filtered_value(self):
        content = ContentRecord(id=1, library_id=1, parameters='{"a": 1}', filtered_parameters='{"b":2}')

        assert JsonParameterFilter()(content) == '{"a":1}'

    def test_invalid_json(self):
        content = ContentRecord(id=5, library_id=1, parameters="{oops")

        with pytest.raises(ParameterFilterError) as exc_info:
            JsonParameterFilter()(content)

        assert exc_info.value.content_id == 5

    def test_non_object(self):
        content = ContentRecord(id=5, library_id=1, parameters="[1, 2]")

        with pytest.raises(ParameterFilterError):
            JsonParameterFilter()(content)


class TestDecodeDisplayOptions:
    """Tests for decode_display_options."""

    def test_nothing_disabled(self):
        assert decode_display_options(0) == DisplayOptions()

    def test_frame_and_embed_disabled(self):
        options = decode_display_options(DisabledFeature.FRAME | DisabledFeature.EMBED)

        assert options.frame is False
        assert options.embed is False
        assert options.export is True
        assert options.copyright is True
        assert options.icon is True

    def test_everything_disabled(self):
        options = decode_display_options(31)

        assert not any(options.model_dump().values())

    def test_unknown_bits_ignored(self):
        assert decode_display_options(32) == DisplayOptions()


class TestHmacTokenGenerator:
    """Tests for HmacTokenGenerator."""

    def test_deterministic_within_window(self):
        now = [1000.0]
        tokens = HmacTokenGenerator("secret", lifetime=100, clock=lambda: now[0])

        first = tokens("editorajax", 7)
        now[0] = 1001.0

        assert tokens("editorajax", 7) == first
        assert len(first) == HmacTokenGenerator.TOKEN_LENGTH

    def test_keyed_by_operation_and_content(self):
        tokens = HmacTokenGenerator("secret", clock=lambda: 1000.0)

        assert tokens("editorajax", 7) != tokens("editorajax", 8)
        assert tokens("editorajax", 7) != tokens("contentupload", 7)

    def test_keyed_by_secret(self):
        a = HmacTokenGenerator("a", clock=lambda: 1000.0)
        b = HmacTokenGenerator("b", clock=lambda: 1000.0)

        assert a("editorajax", 1) != b("editorajax", 1)

    def test_verify_previous_window(self):
        now = [1000.0]
        tokens = HmacTokenGenerator("secret", lifetime=100, clock=lambda: now[0])
        token = tokens("editorajax", 7)

        now[0] = 1049.0
        assert tokens.verify(token, "editorajax", 7) is True

        now[0] = 1101.0
        assert tokens.verify(token, "editorajax", 7) is False

    def test_verify_wrong_content(self):
        tokens = HmacTokenGenerator("secret", clock=lambda: 1000.0)

        assert tokens.verify(tokens("editorajax", 7), "editorajax", 8) is False


# =============================================================================
# IntegrationSynthesizer Tests
# =============================================================================


class TestIntegrationSynthesizer:
    """Tests for IntegrationSynthesizer."""

    def test_content_view(self, synthesizer):
        view = synthesizer.build(ViewKind.CONTENT, content_id=42)

        assert isinstance(view, ContentView)
        assert view.library_name == "H5P.MultiChoice 1.9"
        assert view.url == EMBED_URL
        assert RESIZER_URL in view.resize_code
        assert json.loads(view.json_content)["question"] == "2 + 2 = ?"
        assert view.export_url == ""

    def test_content_view_with_export(self, settings, libraries, contents, asset_builder):
        from h5p_integration.integration import IntegrationSynthesizer

        synthesizer = IntegrationSynthesizer(
            settings=settings.model_copy(update={"export_enabled": True}),
            libraries=libraries,
            contents=contents,
            assets=asset_builder,
            token_generator=lambda operation, content_id: "t",
        )

        view = synthesizer.content_settings(42)

        assert view.export_url == "/sites/default/files/h5p/exports/interactive-content-42.h5p"

    def test_editor_view_new_content(self, synthesizer):
        view = synthesizer.build(ViewKind.EDITOR, content_id=0, language="es")

        assert isinstance(view, EditorView)
        assert view.files_path == "/sites/default/files/h5p/editor"
        assert view.assets.scripts[-1] == "/vendor/h5p/h5p-editor/language/es.js?v42"
        assert view.ajax_path.startswith("/h5peditor/")
        assert view.ajax_path.endswith("/0/")
        assert view.file_icon.path == "/vendor/h5p/h5p-editor/images/binary-file.png"
        assert view.copyright_semantics["name"] == "copyright"

    def test_editor_view_existing_content(self, synthesizer):
        view = synthesizer.build(ViewKind.EDITOR, content_id=7)

        assert view.files_path == "/sites/default/files/h5p/content/7"
        # default language is English
        assert view.assets.scripts[-1].endswith("language/en.js?v42")

    def test_missing_content(self, synthesizer):
        with pytest.raises(ContentNotFoundError):
            synthesizer.build(ViewKind.CONTENT, content_id=999)

    def test_missing_library(self, synthesizer, contents):
        contents.add(ContentRecord(id=50, library_id=404, parameters="{}"))

        with pytest.raises(LibraryNotFoundError) as exc_info:
            synthesizer.content_settings(50)

        assert exc_info.value.library_id == 404

    def test_injected_collaborators(self, settings, libraries, contents, asset_builder):
        from h5p_integration.integration import IntegrationSynthesizer

        filter_parameters = MagicMock(return_value='{"x":1}')
        display = MagicMock(return_value=DisplayOptions(frame=False))
        synthesizer = IntegrationSynthesizer(
            settings=settings,
            libraries=libraries,
            contents=contents,
            assets=asset_builder,
            token_generator=lambda operation, content_id: "t",
            filter_parameters=filter_parameters,
            get_display_options=display,
            copyright_semantics={},
        )

        view = synthesizer.content_settings(42)

        assert view.json_content == '{"x":1}'
        assert view.display_options.frame is False
        display.assert_called_once_with(0)
        assert synthesizer.editor_settings(0).copyright_semantics == {}

    def test_embed_integration(self, synthesizer):
        view, integration = synthesizer.embed_integration(42)

        assert integration["url"] == "/sites/default/files/h5p"
        assert integration["contents"]["cid-42"] == view.to_client()

    def test_views_are_immutable(self, synthesizer):
        from pydantic import ValidationError

        view = synthesizer.content_settings(42)

        with pytest.raises(ValidationError):
            view.url = "https://evil.example"
