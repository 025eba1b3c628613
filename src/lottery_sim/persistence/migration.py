from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..config import GAME_CONSTANTS
from .models import Migration, MigrationResult, MigrationStatus
from .storage import Storage

logger = logging.getLogger(__name__)

VERSION_KEY = "version"

RESET_MESSAGE = "Saved data was corrupted and has been reset."


def check_and_migrate(
    storage: Storage,
    migrations: Sequence[Migration] = (),
    current_version: str = GAME_CONSTANTS.SCHEMA_VERSION,
) -> MigrationResult:
    """Reconcile the stored schema version with current_version.

    Flow:
    1. No stored version (first visit): write current_version, status "ok".
    2. Stored version equals current_version: status "ok", nothing runs.
    3. Otherwise run every migration in list order, then write
       current_version and return "migrated". An empty list still counts as
       a successful migration so a deployment can bump the version alone.
    4. If reading the version or any migration raises, wipe the namespace,
       write current_version and return "reset" with RESET_MESSAGE.

    Versions are compared by equality only; list order decides execution
    order.
    """
    try:
        stored_version: Any = storage.get(VERSION_KEY)
    except Exception:  # noqa: BLE001 an unreadable version tag means corruption
        return _reset(storage, None, current_version)

    if stored_version is None:
        storage.set(VERSION_KEY, current_version)
        return MigrationResult(MigrationStatus.OK, None, current_version)

    if stored_version == current_version:
        return MigrationResult(MigrationStatus.OK, stored_version, current_version)

    try:
        for migration in migrations:
            logger.info("Applying schema migration to %s (from %s)", migration.version, stored_version)
            migration.migrate(storage)
    except Exception:  # noqa: BLE001 partial application is wiped by the reset
        logger.debug("Schema migration failed", exc_info=True)
        return _reset(storage, stored_version, current_version)

    storage.set(VERSION_KEY, current_version)
    logger.info("Schema migrated from %s to %s", stored_version, current_version)
    return MigrationResult(MigrationStatus.MIGRATED, stored_version, current_version)


def _reset(storage: Storage, from_version: Optional[str], to_version: str) -> MigrationResult:
    logger.error("Data corruption or migration failure detected; resetting all data")
    storage.clear()
    storage.set(VERSION_KEY, to_version)
    return MigrationResult(MigrationStatus.RESET, from_version, to_version, RESET_MESSAGE)
