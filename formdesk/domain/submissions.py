"""Domain rules for the submission lifecycle."""
from __future__ import annotations

import time
from typing import Any, Iterable, Mapping

from formdesk.core.schema import RESERVED_SUBMISSION_KEYS


class SubmissionNotFoundError(LookupError):
    """Raised when an operation references an unknown submission id."""

    def __init__(self, submission_id: str) -> None:
        super().__init__(submission_id)
        self.submission_id = submission_id


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""

    return time.time_ns() // 1_000_000


def generate_submission_id(timestamp: int, existing: Iterable[str]) -> str:
    """Return the millisecond timestamp as an id, suffixed when already taken."""

    taken = set(existing)
    candidate = str(timestamp)
    suffix = 0
    while candidate in taken:
        suffix += 1
        candidate = f"{timestamp}-{suffix}"
    return candidate


def split_reserved_fields(fields: Mapping[str, Any]) -> tuple[dict[str, Any], list[str]]:
    """Separate caller-supplied fields from keys the lifecycle owns.

    Returns the accepted extras and the sorted list of dropped keys.
    """

    extras: dict[str, Any] = {}
    dropped: list[str] = []
    for key, value in fields.items():
        if key in RESERVED_SUBMISSION_KEYS:
            dropped.append(key)
        else:
            extras[key] = value
    return extras, sorted(dropped)
