from __future__ import annotations

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from .errors import StorageBackendError, StorageQuotaExceededError

logger = logging.getLogger(__name__)


class KeyValueBackend(ABC):
    """Raw string key-value store shared by every user of the backing store.

    Keys are physical (already namespaced); values are opaque strings.
    Implementations may raise StorageBackendError from any method.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the raw value for key, or None if absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete key. Absent keys are ignored."""

    @abstractmethod
    def keys(self) -> List[str]:
        """Return a snapshot of all physical keys."""


class MemoryBackend(KeyValueBackend):
    """Process-local backend. Data lives only as long as the object."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._items.keys())


class JsonFileBackend(KeyValueBackend):
    """Durable backend keeping every key in a single JSON document.

    File structure:
    {
      "lottery-sim:version": "\\"1.0\\"",
      "lottery-sim:gameState": "{...}",
      "other-app:key": "..."
    }

    The document is re-read on every operation so that other writers sharing
    the file are observed, and rewritten atomically on every mutation.
    """

    def __init__(self, path: str | Path, quota_bytes: Optional[int] = None) -> None:
        self.path = Path(path)
        self.quota_bytes = quota_bytes
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageBackendError(f"Cannot create storage directory {self.path.parent}: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if key not in items:
            return
        del items[key]
        self._write(items)

    def keys(self) -> List[str]:
        return list(self._read().keys())

    # Internal utilities

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageBackendError(f"Unable to read storage document {self.path}: {e}") from e
        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            raise StorageBackendError(f"Storage document {self.path} is not a string mapping")
        return data

    def _write(self, items: Dict[str, str]) -> None:
        text = json.dumps(items, ensure_ascii=False, sort_keys=True, indent=2)
        data = text.encode("utf-8")
        if self.quota_bytes is not None and len(data) > self.quota_bytes:
            raise StorageQuotaExceededError(
                f"Storage quota exceeded: {len(data)} bytes > {self.quota_bytes} bytes"
            )
        try:
            self._atomic_write(data)
        except OSError as e:
            raise StorageBackendError(f"Unable to write storage document {self.path}: {e}") from e

    def _atomic_write(self, data: bytes) -> None:
        """Write to a temp file in the same directory, fsync, then replace.

        Either the old document remains or the new one fully replaces it.
        """
        fd, tmp_name = tempfile.mkstemp(prefix=self.path.name, suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        finally:
            if os.path.exists(tmp_name):
                try:
                    os.remove(tmp_name)
                except OSError:
                    logger.debug("Could not remove temp file %s", tmp_name, exc_info=True)
