from __future__ import annotations

import logging
from typing import Any, Optional

from ..config import GAME_CONSTANTS, StorageSettings
from .backends import JsonFileBackend, KeyValueBackend, MemoryBackend
from .codec import decode_payload, encode_payload
from .errors import PayloadDecodeError, StorageUnavailableError

logger = logging.getLogger(__name__)

PREFIX = f"{GAME_CONSTANTS.STORAGE_PREFIX}:"
PROBE_KEY = f"{PREFIX}__storage_test__"


class Storage:
    """Namespaced JSON storage over a raw key-value backend.

    Every logical key is stored as "lottery-sim:<key>". None of the public
    methods raise: decode and I/O failures are logged and turned into None or
    a no-op, so callers only ever see a decoded value or None.
    """

    def __init__(self, backend: KeyValueBackend, available: bool) -> None:
        self.backend = backend
        self._available = available

    @property
    def is_available(self) -> bool:
        """Whether the durable backend passed the startup write probe."""
        return self._available

    @staticmethod
    def physical_key(key: str) -> str:
        return f"{PREFIX}{key}"

    def get(self, key: str) -> Optional[Any]:
        physical = self.physical_key(key)
        try:
            raw = self.backend.get_item(physical)
        except Exception as e:  # noqa: BLE001 backend failures become a miss
            logger.error("Failed to read data (key: %s): %s", physical, e)
            return None
        if raw is None:
            return None
        try:
            return decode_payload(raw)
        except PayloadDecodeError as e:
            logger.error("Failed to decode JSON payload (key: %s): %s", physical, e)
            return None

    def set(self, key: str, value: Any) -> None:
        physical = self.physical_key(key)
        try:
            # Encode first so a serialization failure never touches the backend
            raw = encode_payload(value)
            self.backend.set_item(physical, raw)
        except Exception as e:  # noqa: BLE001 quota, permission, encode errors
            logger.error("Data save failure (key: %s): %s", physical, e)

    def remove(self, key: str) -> None:
        physical = self.physical_key(key)
        try:
            self.backend.remove_item(physical)
        except Exception as e:  # noqa: BLE001
            logger.error("Failed to remove data (key: %s): %s", physical, e)

    def clear(self) -> None:
        """Delete every key in this namespace; foreign keys are left alone."""
        try:
            for k in self.backend.keys():
                if k.startswith(PREFIX):
                    self.backend.remove_item(k)
        except Exception as e:  # noqa: BLE001
            logger.error("Failed to clear storage: %s", e)

    def __repr__(self) -> str:
        return f"Storage(backend={type(self.backend).__name__}, available={self._available})"


def _probe(backend: KeyValueBackend) -> None:
    backend.set_item(PROBE_KEY, "test")
    backend.remove_item(PROBE_KEY)


def _open_durable_backend(settings: StorageSettings) -> KeyValueBackend:
    if not settings.durable:
        raise StorageUnavailableError("Durable storage disabled by configuration")
    return JsonFileBackend(settings.storage_path, quota_bytes=settings.quota_bytes)


def create_storage(
    backend: Optional[KeyValueBackend] = None,
    settings: Optional[StorageSettings] = None,
) -> Storage:
    """Create a Storage, falling back to memory when durable storage fails.

    The durable backend is the given backend, or a JsonFileBackend at the
    configured path. It must accept a write-then-delete probe; otherwise an
    in-memory backend is used and a single warning is logged.
    """
    try:
        if backend is None:
            backend = _open_durable_backend(settings or StorageSettings.from_env())
        _probe(backend)
    except Exception as e:  # noqa: BLE001 any probe failure means unavailable
        logger.warning("Durable storage unavailable; falling back to in-memory storage: %s", e)
        return Storage(MemoryBackend(), available=False)
    return Storage(backend, available=True)
