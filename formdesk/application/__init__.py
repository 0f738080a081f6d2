"""Application services."""

from .submissions import (
    SubmissionService,
    configure_submission_service,
    get_submission_service,
    reset_submission_service,
)

__all__ = [
    "SubmissionService",
    "configure_submission_service",
    "get_submission_service",
    "reset_submission_service",
]
