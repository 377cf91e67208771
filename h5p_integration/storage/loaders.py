"""
Record Loaders.

Implementations of the LibraryRegistry and ContentStore protocols.

Design Principle:
    Start simple, scale as needed.
    - Development: FileLibraryRegistry / FileContentStore (JSON or YAML files)
    - Testing: MemoryLibraryRegistry / MemoryContentStore
    - Production: the host platform's database (implement in your project)

Files are read on every call; nothing is cached between requests.

Usage:
    # File-based (development)
    libraries = FileLibraryRegistry("data/")
    library_id = libraries.get_library_id("H5P.MultiChoice", 1, 9)

    # Memory (testing)
    libraries = MemoryLibraryRegistry()
    libraries.add(LibraryRecord(library_id=1, machine_name="H5P.MultiChoice", ...))
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

import yaml

from .schemas import ContentRecord, LibraryRecord

logger = logging.getLogger(__name__)


def _load_document(path: Path) -> Any:
    """Load a JSON or YAML file, chosen by suffix."""
    try:
        with path.open(encoding="utf-8") as f:
            if path.suffix in (".yaml", ".yml"):
                return yaml.safe_load(f)
            return json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"[storage] Failed to load {path}: {e}")
        return None


def _first_existing(base_dir: Path, stem: str) -> Path | None:
    for suffix in (".json", ".yaml", ".yml"):
        candidate = base_dir / f"{stem}{suffix}"
        if candidate.exists():
            return candidate
    return None


class FileLibraryRegistry:
    """
    Reads library records from a file.

    Layout:
        data/
        └── libraries.json      # or libraries.yaml

    File Format:
        [
            {
                "library_id": 1,
                "machine_name": "H5P.MultiChoice",
                "major_version": 1,
                "minor_version": 9,
                "embed_types": "div, iframe",
                "supports_fullscreen": "0"
            }
        ]
    """

    def __init__(self, base_dir: str | Path, *, stem: str = "libraries"):
        """
        Initialize registry.

        Args:
            base_dir: Data directory
            stem: Library file name without suffix
        """
        self._base_dir = Path(base_dir)
        self._stem = stem

    def _records(self) -> list[LibraryRecord]:
        path = _first_existing(self._base_dir, self._stem)
        if path is None:
            logger.warning(f"[storage] Library file not found in {self._base_dir}")
            return []

        data = _load_document(path)
        if not isinstance(data, list):
            return []
        return [LibraryRecord.model_validate(item) for item in data]

    def get_library_id(
        self,
        machine_name: str,
        major_version: int,
        minor_version: int,
    ) -> int | None:
        for record in self._records():
            if (
                record.machine_name == machine_name
                and record.major_version == major_version
                and record.minor_version == minor_version
            ):
                return record.library_id
        return None

    def get_library(self, library_id: int) -> LibraryRecord | None:
        for record in self._records():
            if record.library_id == library_id:
                return record
        return None


class FileContentStore:
    """
    Reads content records from one file per content id.

    Layout:
        data/
        └── content/
            ├── 1.json
            └── 2.yaml
    """

    def __init__(self, base_dir: str | Path, *, folder: str = "content"):
        self._content_dir = Path(base_dir) / folder

    def get_content(self, content_id: int) -> ContentRecord | None:
        path = _first_existing(self._content_dir, str(content_id))
        if path is None:
            logger.debug(f"[storage] No content file for id={content_id}")
            return None

        data = _load_document(path)
        if not isinstance(data, dict):
            return None

        data.setdefault("id", content_id)
        if isinstance(data.get("parameters"), (dict, list)):
            data["parameters"] = json.dumps(data["parameters"])
        return ContentRecord.model_validate(data)


class MemoryLibraryRegistry:
    """
    In-memory library registry for testing.

    Usage:
        registry = MemoryLibraryRegistry([record_a, record_b])
        registry.add(record_c)
    """

    def __init__(self, records: Iterable[LibraryRecord] = ()):
        self._records: dict[int, LibraryRecord] = {}
        for record in records:
            self.add(record)

    def add(self, record: LibraryRecord) -> None:
        """Add or replace a library record."""
        self._records[record.library_id] = record

    def get_library_id(
        self,
        machine_name: str,
        major_version: int,
        minor_version: int,
    ) -> int | None:
        for record in self._records.values():
            if (
                record.machine_name == machine_name
                and record.major_version == major_version
                and record.minor_version == minor_version
            ):
                return record.library_id
        return None

    def get_library(self, library_id: int) -> LibraryRecord | None:
        return self._records.get(library_id)

    def clear(self) -> None:
        """Remove all records."""
        self._records.clear()


class MemoryContentStore:
    """In-memory content store for testing."""

    def __init__(self, records: Iterable[ContentRecord] = ()):
        self._records: dict[int, ContentRecord] = {}
        for record in records:
            self.add(record)

    def add(self, record: ContentRecord) -> None:
        """Add or replace a content record."""
        self._records[record.id] = record

    def get_content(self, content_id: int) -> ContentRecord | None:
        return self._records.get(content_id)

    def clear(self) -> None:
        """Remove all records."""
        self._records.clear()
