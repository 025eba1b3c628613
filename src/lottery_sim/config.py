from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from platformdirs import user_data_dir

logger = logging.getLogger(__name__)

APP_NAME = "lottery-sim"
APP_AUTHOR = "lottery-sim"


@dataclass(frozen=True)
class GameConstants:
    """Fixed game rules shared by the persistence layer and its callers."""

    # Starting balance for a fresh game state
    INITIAL_BALANCE: int = 100_000
    # Tickets bought per draw
    DRAW_COUNT: int = 10
    TICKET_PRICE: int = 300
    # Balance below which a daily refill is granted
    REFILL_THRESHOLD: int = 3_000
    REFILL_AMOUNT: int = 30_000
    # Draw history cap (FIFO)
    MAX_HISTORY: int = 100
    SCHEMA_VERSION: str = "1.0"
    STORAGE_PREFIX: str = "lottery-sim"


GAME_CONSTANTS = GameConstants()


def default_data_dir() -> Path:
    """Return the platform-specific directory for durable storage.

    Linux: ~/.local/share/lottery-sim
    macOS: ~/Library/Application Support/lottery-sim
    Windows: %LOCALAPPDATA%\\lottery-sim\\lottery-sim
    """
    return Path(user_data_dir(appname=APP_NAME, appauthor=APP_AUTHOR))


def _as_bool(value: Any) -> bool:
    """Interpret common truthy/falsey strings ("1", "yes", "off", ...) as a bool."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "y", "on"}:
            return True
        if v in {"0", "false", "no", "n", "off"}:
            return False
    raise ValueError(f"not a boolean: {value!r}")


def _as_optional_int(value: str) -> Optional[int]:
    if value.strip().lower() in {"none", "off", "0"}:
        return None
    n = int(value)
    if n < 0:
        raise ValueError("must be >= 0")
    return n


@dataclass
class StorageSettings:
    """Where and how durable storage is kept.

    Values can be overridden from environment variables (prefix: LOTTERY_SIM_):

    - LOTTERY_SIM_DATA_DIR: directory holding the storage document
    - LOTTERY_SIM_STORAGE_FILE: file name of the storage document
    - LOTTERY_SIM_DURABLE: set to "0"/"false" to force in-memory storage
    - LOTTERY_SIM_QUOTA_BYTES: maximum document size; "0"/"none" disables it
    - LOTTERY_SIM_LOG_LEVEL: level used by the command line entry point
    """

    data_dir: Path = field(default_factory=default_data_dir)
    file_name: str = "storage.json"
    durable: bool = True
    quota_bytes: Optional[int] = 5 * 1024 * 1024
    log_level: str = "INFO"

    @property
    def storage_path(self) -> Path:
        return self.data_dir / self.file_name

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "StorageSettings":
        env = os.environ if env is None else env
        mapping = {
            "LOTTERY_SIM_DATA_DIR": ("data_dir", lambda v: Path(v).expanduser()),
            "LOTTERY_SIM_STORAGE_FILE": ("file_name", str),
            "LOTTERY_SIM_DURABLE": ("durable", _as_bool),
            "LOTTERY_SIM_QUOTA_BYTES": ("quota_bytes", _as_optional_int),
            "LOTTERY_SIM_LOG_LEVEL": ("log_level", lambda v: v.strip().upper()),
        }
        overrides: Dict[str, Any] = {}
        for env_key, (field_name, caster) in mapping.items():
            raw = env.get(env_key)
            if raw is None or raw == "":
                continue
            try:
                overrides[field_name] = caster(raw)
            except ValueError as exc:
                logger.error("Invalid env for %s=%r: %s", env_key, raw, exc)
        return cls(**overrides)
