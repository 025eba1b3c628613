"""Persistence subsystem for the lottery simulator.

This package provides:
- A namespaced Storage that falls back to memory when durable storage fails
- Runtime validators gating every decoded record
- Schema version checks with ordered migrations and destructive recovery
- CRUD helpers for the game state singleton and the bounded draw history

Nothing in here raises on bad stored data: failures are logged and the
documented fallback value is returned instead.
"""

from .backends import JsonFileBackend, KeyValueBackend, MemoryBackend
from .draw_history import add_draw_history, clear_draw_history, load_draw_history
from .errors import (
    MigrationError,
    PayloadDecodeError,
    PayloadEncodeError,
    StorageBackendError,
    StorageError,
    StorageQuotaExceededError,
    StorageUnavailableError,
)
from .game_state import (
    create_initial_game_state,
    load_game_state,
    reset_game_state,
    save_game_state,
)
from .migration import RESET_MESSAGE, check_and_migrate
from .models import (
    DrawHistory,
    DrawResult,
    GameState,
    Migration,
    MigrationResult,
    MigrationStatus,
)
from .storage import Storage, create_storage
from .validators import is_draw_history, is_draw_result, is_game_state

__all__ = [
    "KeyValueBackend",
    "MemoryBackend",
    "JsonFileBackend",
    "Storage",
    "create_storage",
    "is_draw_result",
    "is_draw_history",
    "is_game_state",
    "Migration",
    "MigrationResult",
    "MigrationStatus",
    "RESET_MESSAGE",
    "check_and_migrate",
    "GameState",
    "DrawHistory",
    "DrawResult",
    "create_initial_game_state",
    "load_game_state",
    "save_game_state",
    "reset_game_state",
    "load_draw_history",
    "add_draw_history",
    "clear_draw_history",
    "StorageError",
    "StorageBackendError",
    "StorageQuotaExceededError",
    "StorageUnavailableError",
    "PayloadDecodeError",
    "PayloadEncodeError",
    "MigrationError",
]
