"""
FILE: kanban/core/storage.py
PURPOSE: Key-value storage backends for saved board state
EXPORTS:
  - STORAGE_DIR: Default directory for saved data
  - MemoryStorage (dict-backed)
  - FileStorage (one JSON file per namespace)
  - default_storage() -> FileStorage
DEPENDENCIES:
  - json (stdlib)
  - os, tempfile (atomic replace)
  - pathlib (stdlib)
  - kanban.core.exceptions (StorageError)
NOTES:
  - Interface: put(namespace, key, text) / get(namespace, key) -> str | None
  - Data stored at ~/.kanban unless KANBAN_HOME is set
  - Each put rewrites the namespace file wholesale
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from .exceptions import StorageError

logger = logging.getLogger(__name__)

# Data directory location (cross-platform)
STORAGE_DIR = Path(os.environ.get("KANBAN_HOME") or Path.home() / ".kanban")


class MemoryStorage:
    """In-process storage, used by tests and embedders."""

    def __init__(self):
        self._data: Dict[str, Dict[str, str]] = {}

    def put(self, namespace: str, key: str, text: str) -> None:
        self._data.setdefault(namespace, {})[key] = text

    def get(self, namespace: str, key: str) -> Optional[str]:
        return self._data.get(namespace, {}).get(key)


class FileStorage:
    """
    Namespaced key-value files on disk.

    Each namespace is a JSON object file, <directory>/<namespace>.json,
    mapping keys to text values.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _path(self, namespace: str) -> Path:
        return self.directory / f"{namespace}.json"

    def _read(self, namespace: str) -> Dict[str, str]:
        path = self._path(namespace)
        if not path.exists():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageError(path, str(e))
        if not isinstance(data, dict):
            raise StorageError(path, "expected a JSON object")
        return data

    def put(self, namespace: str, key: str, text: str) -> None:
        """Store text under key, replacing the namespace file atomically."""
        self.directory.mkdir(parents=True, exist_ok=True)
        data = self._read(namespace)
        data[key] = text

        path = self._path(namespace)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{namespace}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug("Wrote %s/%s to %s", namespace, key, path)

    def get(self, namespace: str, key: str) -> Optional[str]:
        value = self._read(namespace).get(key)
        if value is not None and not isinstance(value, str):
            raise StorageError(self._path(namespace), f"value of '{key}' is not text")
        return value


def default_storage() -> FileStorage:
    """Storage rooted at the current STORAGE_DIR."""
    return FileStorage(STORAGE_DIR)
