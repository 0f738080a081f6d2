"""Domain layer definitions."""

from .submissions import (
    SubmissionNotFoundError,
    generate_submission_id,
    now_ms,
    split_reserved_fields,
)

__all__ = [
    "SubmissionNotFoundError",
    "generate_submission_id",
    "now_ms",
    "split_reserved_fields",
]
