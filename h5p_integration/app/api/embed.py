"""
Standalone embed page.

GET /h5p/embed/{content_id} renders the content in an isolated document that
other sites load in an iframe (see ContentView.embed_code).
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from h5p_integration.app.dependencies import get_settings, get_synthesizer
from h5p_integration.config import AppSettings
from h5p_integration.embed import render_embed_page
from h5p_integration.integration import IntegrationSynthesizer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/h5p", tags=["embed"])

DEFAULT_TITLE = "Interactive content"


@router.get("/embed/{content_id}", response_class=HTMLResponse)
def embed_page(
    content_id: int,
    lang: str | None = None,
    settings: AppSettings = Depends(get_settings),
    synthesizer: IntegrationSynthesizer = Depends(get_synthesizer),
) -> HTMLResponse:
    """Render the embed document for one content."""
    view, integration = synthesizer.embed_integration(content_id)
    assets = synthesizer.assets.core_manifest()

    html = render_embed_page(
        lang or settings.default_language,
        view.title or DEFAULT_TITLE,
        content_id,
        assets.scripts,
        assets.styles,
        integration,
    )

    logger.info(f"[embed] Served embed page | content={content_id}")
    return HTMLResponse(content=html)
