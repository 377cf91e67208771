"""
HTTP routers.
"""

from .embed import router as embed_router
from .settings import router as settings_router

__all__ = ["embed_router", "settings_router"]
