"""
Configuration Schemas for the H5P integration service.

Security:
    The token secret uses SecretStr to prevent accidental logging.
    Access the value with `.get_secret_value()`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr


class ApiVersion(BaseModel):
    """Core API version advertised to the editor."""

    major_version: int = Field(1, ge=0, serialization_alias="majorVersion")
    minor_version: int = Field(12, ge=0, serialization_alias="minorVersion")

    class Config:
        frozen = True
        populate_by_name = True


class AppSettings(BaseModel):
    """
    Application settings model.

    Path settings follow the host platform's layout:

        <base_path>vendor/h5p/h5p-core/        core runtime assets
        <base_path>vendor/h5p/h5p-editor/      editor assets + language/
        <files_url>/<h5p_path>/content/<id>    content files
        <files_url>/<h5p_path>/editor          editor scratch files
        <files_url>/<h5p_path>/exports/        exported .h5p packages

    Security:
        The token secret uses SecretStr to prevent accidental logging.
    """

    # Service identity
    service_name: str = "h5p-integration"
    environment: str = "development"
    debug: bool = False

    # URLs
    site_url: str = Field("http://localhost:8000", description="Absolute site URL, no trailing slash")
    base_path: str = Field("/", description="Path prefix for site-relative URLs")
    files_url: str = Field("/sites/default/files", description="Public files URL")
    h5p_path: str = Field("h5p", description="H5P folder below the public files URL")

    # Assets
    core_path: str = Field("vendor/h5p/h5p-core/", description="Core assets, relative to base_path")
    editor_path: str = Field("vendor/h5p/h5p-editor/", description="Editor assets, relative to base_path")
    module_path: str = Field("vendor/h5p", description="Module path advertised to the editor")
    library_path: str = Field("libraries/", description="Installed libraries folder")
    asset_root: str = Field(".", description="Filesystem directory that base_path maps onto")
    cache_buster: str = Field("", description="Asset versioning token (empty = no query string)")

    # Features
    export_enabled: bool = Field(False, description="Whether .h5p exports are offered")
    default_language: str = Field("en", description="Fallback UI language")
    api_version: ApiVersion = Field(default_factory=ApiVersion)

    # Storage
    data_dir: str = Field("data", description="Directory with libraries/ and content/ records")

    # Security
    token_secret: SecretStr = Field(default=SecretStr(""), description="Secret for editor AJAX tokens")
    token_lifetime: int = Field(86400, ge=1, description="Token validity window in seconds")

    class Config:
        env_prefix = "H5P_"
        case_sensitive = False

    @property
    def h5p_files_path(self) -> str:
        """Public URL of the H5P folder, e.g. '/sites/default/files/h5p'."""
        return f"{self.files_url.rstrip('/')}/{self.h5p_path.strip('/')}"

    def url(self, path: str) -> str:
        """Build a site-relative URL below base_path."""
        return f"{self.base_path.rstrip('/')}/{path.lstrip('/')}"

    def absolute_url(self, path: str) -> str:
        """Build an absolute URL below site_url."""
        return f"{self.site_url.rstrip('/')}{self.url(path)}"
