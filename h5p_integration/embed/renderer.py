"""
Embed Page Renderer.

Emits the standalone HTML document used when content is embedded in an
iframe on another site.

DOM contract:
    - <html lang="..." class="h5p-iframe">
    - one <script src> per script and one <link rel="stylesheet"> per style,
      in the order given
    - a single <div class="h5p-content" data-content-id="<id>">
    - an inline script that stores the frozen payload in the H5PIntegration
      global and then passes the same value to the runtime's init call once
      the document is ready

The renderer only iterates and escapes. A payload that cannot be serialized
raises EmbedRenderError.
"""

from __future__ import annotations

import json
import logging
from html import escape
from typing import Any, Sequence

from h5p_integration.errors import EmbedRenderError

logger = logging.getLogger(__name__)

INTEGRATION_GLOBAL = "H5PIntegration"
INIT_CALL = "H5P.init"

PAGE_TEMPLATE = """<!doctype html>
<html lang="{lang}" class="h5p-iframe">
<head>
  <meta charset="utf-8">
  <title>{title}</title>
{assets}
</head>
<body>
  <div class="h5p-content" data-content-id="{content_id}"></div>
  <script>
    window.{global_name} = Object.freeze({payload});
    H5P.jQuery(document).ready(function () {{
      {init_call}(document.body, window.{global_name});
    }});
  </script>
</body>
</html>
"""


def serialize_payload(integration: Any) -> str:
    """
    JSON for an inline <script>.

    Raises:
        EmbedRenderError: If the payload is not JSON-serializable
    """
    try:
        payload = json.dumps(integration, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EmbedRenderError("Integration payload is not serializable", detail=str(e)) from e

    # Keep "</script>" and HTML comments inside the payload from closing the tag
    return (
        payload.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def render_embed_page(
    language: str,
    content_title: str,
    content_id: int | str,
    scripts: Sequence[str],
    styles: Sequence[str],
    integration: Any,
) -> str:
    """
    Render the standalone embed document.

    Args:
        language: Document language
        content_title: Page title
        content_id: Value of the container's data-content-id
        scripts: Script URLs in load order
        styles: Stylesheet URLs in load order
        integration: JSON-compatible integration payload

    Returns:
        HTML document

    Raises:
        EmbedRenderError: If the payload cannot be serialized
    """
    payload = serialize_payload(integration)

    asset_lines = [f'  <script src="{escape(src)}"></script>' for src in scripts]
    asset_lines += [f'  <link rel="stylesheet" href="{escape(href)}">' for href in styles]

    logger.debug(
        f"[embed] Rendering | content={content_id} | scripts={len(scripts)} | styles={len(styles)}"
    )

    return PAGE_TEMPLATE.format(
        lang=escape(language),
        title=escape(content_title),
        assets="\n".join(asset_lines),
        content_id=escape(str(content_id)),
        global_name=INTEGRATION_GLOBAL,
        payload=payload,
        init_call=INIT_CALL,
    )
