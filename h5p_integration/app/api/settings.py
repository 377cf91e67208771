"""
Integration settings API.

Endpoints:
    GET /api/v1/content/{content_id}/settings   ContentView
    GET /api/v1/editor/settings                 EditorView
    GET /api/v1/libraries/resolve               library string -> id
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from h5p_integration.app.dependencies import get_resolver, get_synthesizer
from h5p_integration.integration import IntegrationSynthesizer, ViewKind
from h5p_integration.library import LibraryResolver

logger = logging.getLogger(__name__)

router = APIRouter(tags=["settings"])


@router.get("/content/{content_id}/settings")
def content_settings(
    content_id: int,
    synthesizer: IntegrationSynthesizer = Depends(get_synthesizer),
) -> dict[str, Any]:
    """Player settings for a stored content."""
    return synthesizer.build(ViewKind.CONTENT, content_id=content_id).to_client()


@router.get("/editor/settings")
def editor_settings(
    content_id: int = Query(0, ge=0),
    language: str | None = None,
    synthesizer: IntegrationSynthesizer = Depends(get_synthesizer),
) -> dict[str, Any]:
    """Editor settings; content_id 0 means new content."""
    return synthesizer.build(ViewKind.EDITOR, content_id=content_id, language=language).to_client()


@router.get("/libraries/resolve")
def resolve_library(
    library: str = Query(..., description="e.g. 'H5P.MultiChoice 1.9'"),
    resolver: LibraryResolver = Depends(get_resolver),
) -> dict[str, Any]:
    """Resolve a library string to its installed id."""
    resolution = resolver.resolve(library)
    if not resolution.found:
        raise HTTPException(status_code=404, detail=f"Library '{resolution.identifier}' is not installed")
    return resolution.to_dict()
