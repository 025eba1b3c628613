from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from ..config import GAME_CONSTANTS
from .models import GameState
from .storage import Storage
from .validators import is_game_state

logger = logging.getLogger(__name__)

STORAGE_KEY = "gameState"


def _to_iso_utc(moment: datetime) -> str:
    """UTC ISO 8601 with milliseconds, e.g. 2026-01-01T00:00:00.000Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _to_local_ymd(moment: datetime) -> str:
    # astimezone() with no argument converts to the local zone; naive values
    # are already treated as local time
    return moment.astimezone().strftime("%Y-%m-%d")


def create_initial_game_state(now: Optional[datetime] = None) -> GameState:
    """Build a fresh game state.

    lastRefillDate uses the local calendar date of now, while the timestamps
    are UTC, so the two can differ by a day around midnight.
    """
    moment = now if now is not None else datetime.now(timezone.utc)
    stamp = _to_iso_utc(moment)
    return {
        "balance": GAME_CONSTANTS.INITIAL_BALANCE,
        "totalSpent": 0,
        "totalWon": 0,
        "totalTickets": 0,
        "totalDraws": 0,
        "winCountByLevel": {},
        "lastRefillDate": _to_local_ymd(moment),
        "isFirstVisit": True,
        "createdAt": stamp,
        "updatedAt": stamp,
    }


def load_game_state(storage: Storage) -> GameState:
    """Load the game state, falling back to a fresh one if missing or invalid."""
    data = storage.get(STORAGE_KEY)
    if data is None:
        return create_initial_game_state()
    if not is_game_state(data):
        logger.error("GameState validation failure; falling back to initial state")
        return create_initial_game_state()
    return data


def save_game_state(storage: Storage, state: GameState) -> None:
    """Persist the whole game state. Never raises."""
    try:
        storage.set(STORAGE_KEY, state)
    except Exception as e:  # noqa: BLE001 storage handles are injected
        logger.error("GameState save failure: %s", e)


def reset_game_state(storage: Storage) -> GameState:
    """Overwrite the stored game state with a fresh one and return it."""
    state = create_initial_game_state()
    save_game_state(storage, state)
    return state
