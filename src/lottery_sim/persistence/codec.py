from __future__ import annotations

import json
from typing import Any

from .errors import PayloadDecodeError, PayloadEncodeError


def encode_payload(value: Any) -> str:
    """Encode a value to compact JSON text.

    NaN and Infinity are rejected because they are not valid JSON and would
    not survive a round trip through other readers of the store.
    """
    try:
        return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise PayloadEncodeError(f"Value is not JSON serializable: {e}") from e


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {token!r}")


def decode_payload(text: str) -> Any:
    """Decode JSON text into plain Python values.

    The NaN, Infinity and -Infinity tokens Python's json module accepts by
    default are rejected, matching what encode_payload will write.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        raise PayloadDecodeError(f"Invalid JSON: {e}") from e
