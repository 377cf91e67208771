"""
Standalone embed page rendering.
"""

from .renderer import INTEGRATION_GLOBAL, render_embed_page, serialize_payload

__all__ = [
    "INTEGRATION_GLOBAL",
    "render_embed_page",
    "serialize_payload",
]
