"""
H5P Integration - server-side assembly of the settings H5P's client runtime
needs to render or edit interactive content.

Components:

- **Library Resolver**: "H5P.MultiChoice 1.9" -> installed library id
- **Asset Manifest Builder**: ordered, cache-busted core/editor asset URLs
  with translation fallback
- **Integration Settings Synthesizer**: player (ContentView) and editor
  (EditorView) payloads
- **Embed Page Renderer**: standalone HTML document for iframe embedding

Quick Start:
    >>> from h5p_integration.library import LibraryResolver
    >>> from h5p_integration.storage import MemoryLibraryRegistry
    >>>
    >>> resolver = LibraryResolver(MemoryLibraryRegistry().get_library_id)
    >>> resolver.parse("H5P.MultiChoice 1.9").major_version
    1
"""

__version__ = "0.1.0"
__license__ = "MIT"

from h5p_integration.errors import H5PIntegrationError, MalformedIdentifierError
from h5p_integration.integration import ContentView, EditorView, IntegrationSynthesizer, ViewKind
from h5p_integration.library import LibraryIdentifier, LibraryResolver

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Core
    "ContentView",
    "EditorView",
    "H5PIntegrationError",
    "IntegrationSynthesizer",
    "LibraryIdentifier",
    "LibraryResolver",
    "MalformedIdentifierError",
    "ViewKind",
]
