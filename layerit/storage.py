"""
Persisted key-value store.

A flat string -> string store, the local equivalent of browser localStorage.
Callers serialize their own values (the routine is stored as a JSON array of
product ids, the skin type as a bare string) and read them back verbatim.

Two backends are provided:
- JsonFileStore: keeps all entries in a single JSON object on disk; used by
  the app so the routine survives restarts
- MemoryStore: process-local dict; used in tests and as a throwaway store

Reads never fail: a missing file or key means "no saved state", and an
unreadable or corrupt file is logged and treated as empty. Writes that hit an
OS error raise StorageError.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from layerit.config import StorageConfig

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a value cannot be written to the store."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"Could not save '{key}': {message}")


class KeyValueStore(ABC):
    """Base interface for flat string key-value storage."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete a key. Removing an absent key is a no-op."""

    @abstractmethod
    def clear(self) -> None:
        """Delete every key."""


class MemoryStore(KeyValueStore):
    """In-memory store backed by a dict."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()


class JsonFileStore(KeyValueStore):
    """
    Store backed by a single JSON object file.

    Each operation re-reads the file so separate store instances on the same
    path (e.g. across Streamlit reruns) see each other's writes.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable storage file %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring storage file %s: expected a JSON object", self.path)
            return {}

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, items: Dict[str, str], key: str) -> None:
        # readers only ever see the old file or the complete new one
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise StorageError(key, str(e)) from e
        logger.debug("Wrote %d storage entries to %s", len(items), self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = str(value)
        self._write_all(items, key)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key not in items:
            return
        del items[key]
        self._write_all(items, key)

    def clear(self) -> None:
        if not self.path.exists():
            return
        try:
            self.path.unlink()
        except OSError as e:
            raise StorageError("*", str(e)) from e


def get_default_store() -> KeyValueStore:
    """Create the file-backed store at the configured path."""
    return JsonFileStore(StorageConfig.get_storage_path())
