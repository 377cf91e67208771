"""
Local asset store.

Answers "does this asset URL exist?" by mapping URL paths below a prefix onto
a directory on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalAssetStore:
    """
    Filesystem-backed asset existence check.

    Example:
        store = LocalAssetStore("/var/www/html", url_prefix="/")
        store.exists("/vendor/h5p/h5p-editor/language/es.js")
        # -> checks /var/www/html/vendor/h5p/h5p-editor/language/es.js
    """

    def __init__(self, root: str | Path, *, url_prefix: str = "/"):
        self._root = Path(root).resolve()
        self._url_prefix = "/" + url_prefix.strip("/")

    def path_for(self, url_path: str) -> Path | None:
        """Filesystem path for a URL path, or None if outside the store."""
        path = url_path.split("?", 1)[0]
        if not path.startswith("/"):
            path = "/" + path

        prefix = self._url_prefix.rstrip("/") + "/"
        if not path.startswith(prefix):
            return None

        candidate = (self._root / path[len(prefix):]).resolve()
        if not candidate.is_relative_to(self._root):
            logger.warning(f"[assets] Path escapes asset root: {url_path}")
            return None
        return candidate

    def exists(self, url_path: str) -> bool:
        candidate = self.path_for(url_path)
        return candidate is not None and candidate.is_file()
