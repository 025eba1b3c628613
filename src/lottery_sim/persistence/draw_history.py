from __future__ import annotations

import logging
from typing import List, Sequence

from ..config import GAME_CONSTANTS
from .models import DrawHistory
from .storage import Storage
from .validators import is_draw_history

logger = logging.getLogger(__name__)

STORAGE_KEY = "drawHistory"


def load_draw_history(storage: Storage) -> List[DrawHistory]:
    """Load the draw history, skipping entries that fail validation.

    Returns a new list; a missing or non-list payload yields [].
    """
    data = storage.get(STORAGE_KEY)
    if data is None:
        return []
    if not isinstance(data, list):
        logger.error("DrawHistory payload is not an array; falling back to empty history")
        return []

    valid = [entry for entry in data if is_draw_history(entry)]
    if len(valid) != len(data):
        logger.error(
            "DrawHistory contained invalid entries; skipped %d of %d",
            len(data) - len(valid),
            len(data),
        )
    return valid


def add_draw_history(
    storage: Storage,
    history: Sequence[DrawHistory],
    new_draw: DrawHistory,
) -> List[DrawHistory]:
    """Append new_draw, trim to MAX_HISTORY oldest-first and persist.

    history is left untouched; the returned list is always a new object.
    """
    updated = [*history, new_draw]
    limit = GAME_CONSTANTS.MAX_HISTORY
    trimmed = updated[-limit:] if len(updated) > limit else updated

    try:
        storage.set(STORAGE_KEY, trimmed)
    except Exception as e:  # noqa: BLE001 storage handles are injected
        logger.error("DrawHistory save failure: %s", e)

    return trimmed


def clear_draw_history(storage: Storage) -> None:
    """Remove the history key entirely."""
    storage.remove(STORAGE_KEY)
