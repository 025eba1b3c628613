"""Stored record shapes.

Records are kept as plain dicts exactly as they are decoded from JSON, so the
shapes below are TypedDicts whose keys are the camelCase wire names. Nothing
here validates; see validators.py for the runtime checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from .storage import Storage


class DrawResult(TypedDict):
    """Outcome of a single ticket. prizeLevel None means no prize."""

    prizeLevel: Optional[str]
    amount: float


class DrawHistory(TypedDict):
    """One multi-ticket draw as kept in the bounded history log."""

    id: str
    timestamp: str
    cost: float
    totalWin: float
    results: List[DrawResult]


class GameState(TypedDict):
    """Singleton aggregate of balance and running totals."""

    balance: float
    totalSpent: float
    totalWon: float
    totalTickets: int
    totalDraws: int
    winCountByLevel: Dict[str, float]
    lastRefillDate: str
    isFirstVisit: bool
    createdAt: str
    updatedAt: str


class MigrationStatus(str, Enum):
    OK = "ok"
    MIGRATED = "migrated"
    RESET = "reset"


@dataclass(frozen=True)
class Migration:
    """One schema upgrade step.

    migrate receives the storage handle and may read or write any key. It
    signals failure by raising.
    """

    version: str
    migrate: Callable[["Storage"], None]


@dataclass(frozen=True)
class MigrationResult:
    status: MigrationStatus
    from_version: Optional[str]
    to_version: str
    message: Optional[str] = None
