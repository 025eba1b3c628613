"""Runtime type guards for decoded storage payloads.

Each predicate takes any decoded JSON value and returns a bool. They never
log, never raise and never mutate their input; callers decide how to report
a rejected value.
"""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Any

# Calendar date only; full timestamps are rejected
_YMD_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _is_number(value: Any) -> bool:
    # bool is an int subclass but JSON true/false are not numbers
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_non_negative_finite(value: Any) -> bool:
    return _is_number(value) and math.isfinite(value) and value >= 0


def _is_non_negative_integer(value: Any) -> bool:
    if not _is_non_negative_finite(value):
        return False
    return isinstance(value, int) or float(value).is_integer()


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def _is_datetime_str(value: Any) -> bool:
    """True for strings datetime can parse, e.g. "2026-01-01T00:00:00.000Z".

    Relies on the Python 3.11 fromisoformat, which accepts any number of
    fractional second digits.
    """
    if not isinstance(value, str) or not value:
        return False
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return False
    return True


def _is_ymd(value: Any) -> bool:
    return isinstance(value, str) and _YMD_RE.fullmatch(value) is not None


def is_draw_result(value: Any) -> bool:
    if not isinstance(value, dict):
        return False

    # prizeLevel: None or non-empty string; a missing key is not None
    if "prizeLevel" not in value:
        return False
    level = value["prizeLevel"]
    if level is not None and not _is_non_empty_str(level):
        return False

    # A None prizeLevel with a positive amount is accepted
    return _is_non_negative_finite(value.get("amount"))


def is_draw_history(value: Any) -> bool:
    if not isinstance(value, dict):
        return False

    if not _is_non_empty_str(value.get("id")):
        return False
    if not _is_datetime_str(value.get("timestamp")):
        return False
    if not _is_non_negative_finite(value.get("cost")):
        return False
    if not _is_non_negative_finite(value.get("totalWin")):
        return False

    results = value.get("results")
    if not isinstance(results, list) or len(results) == 0:
        return False
    return all(is_draw_result(r) for r in results)


def is_game_state(value: Any) -> bool:
    if not isinstance(value, dict):
        return False

    for name in ("balance", "totalSpent", "totalWon"):
        if not _is_non_negative_finite(value.get(name)):
            return False
    for name in ("totalTickets", "totalDraws"):
        if not _is_non_negative_integer(value.get(name)):
            return False

    win_counts = value.get("winCountByLevel")
    if not isinstance(win_counts, dict):
        return False
    for count in win_counts.values():
        # NaN fails the >= comparison and is rejected here too
        if not _is_number(count) or not count >= 0:
            return False

    if not _is_ymd(value.get("lastRefillDate")):
        return False
    if not isinstance(value.get("isFirstVisit"), bool):
        return False
    if not _is_datetime_str(value.get("createdAt")):
        return False
    return _is_datetime_str(value.get("updatedAt"))
