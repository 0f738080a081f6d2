"""Application service layer for the submission lifecycle.

Submissions move ``pending -> approved | rejected`` and approved ones are later
marked ``done`` by the bot.  Every write operation is one load, an in-memory
mutation and one save, so a status change and its log entry persist together.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Mapping

from formdesk.core.config import load_settings
from formdesk.core.schema import Document, LogEntry, LogType, Submission, SubmissionStatus
from formdesk.domain import SubmissionNotFoundError, generate_submission_id, now_ms, split_reserved_fields
from formdesk.infrastructure import DocumentStore, JsonFileStore

logger = logging.getLogger(__name__)


class SubmissionService:
    """Coordinates submission use cases against a document store."""

    def __init__(self, store: DocumentStore, *, clock: Callable[[], int] = now_ms) -> None:
        self._store = store
        self._clock = clock
        # serialises load/mutate/save cycles within this process
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _find(document: Document, submission_id: str) -> Submission:
        for submission in document.submissions:
            if submission.id == submission_id:
                return submission
        raise SubmissionNotFoundError(submission_id)

    def _touch(self, submission: Submission) -> int:
        timestamp = max(self._clock(), submission.created_at)
        submission.updated_at = timestamp
        return timestamp

    def _transition(
        self,
        submission_id: str,
        event: LogType,
        status: SubmissionStatus | None,
        outcome: str,
    ) -> Submission:
        with self._lock:
            document = self._store.load()
            try:
                submission = self._find(document, submission_id)
            except SubmissionNotFoundError:
                logger.warning("%s requested for unknown submission %s", event, submission_id)
                raise
            if status is not None:
                submission.status = status
            else:
                submission.done = True
            timestamp = self._touch(submission)
            document.logs.append(LogEntry(type=event, id=submission.id, time=timestamp))
            self._store.save(document)
        logger.info("submission %s %s", submission_id, outcome)
        return submission.model_copy(deep=True)

    # ------------------------------------------------------------------
    # lifecycle
    # ------------------------------------------------------------------
    def submit(self, fields: Mapping[str, Any]) -> Submission:
        extras, dropped = split_reserved_fields(fields)
        if dropped:
            logger.warning("ignoring reserved submission fields: %s", ", ".join(dropped))

        with self._lock:
            document = self._store.load()
            timestamp = self._clock()
            submission_id = generate_submission_id(timestamp, (item.id for item in document.submissions))
            submission = Submission.model_validate(
                {
                    "id": submission_id,
                    **extras,
                    "status": "pending",
                    "done": False,
                    "createdAt": timestamp,
                    "updatedAt": timestamp,
                }
            )
            document.submissions.append(submission)
            document.logs.append(LogEntry(type="submit", id=submission_id, time=timestamp))
            self._store.save(document)
        logger.info("submission %s received", submission_id)
        return submission.model_copy(deep=True)

    def approve(self, submission_id: str) -> Submission:
        return self._transition(submission_id, "approve", "approved", "approved")

    def reject(self, submission_id: str) -> Submission:
        return self._transition(submission_id, "reject", "rejected", "rejected")

    def mark_done(self, submission_id: str) -> Submission:
        """Flag a submission as handled; does not check its status."""

        return self._transition(submission_id, "done", None, "marked done")

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------
    def list_submissions(self) -> list[Submission]:
        return list(self._store.load().submissions)

    def list_approved_pending(self) -> list[Submission]:
        return [item for item in self._store.load().submissions if item.status == "approved" and not item.done]

    def list_logs(self) -> list[LogEntry]:
        return list(self._store.load().logs)


_service: SubmissionService | None = None


def configure_submission_service(service: SubmissionService) -> None:
    """Install the submission service used by the HTTP layer."""

    global _service
    _service = service


def get_submission_service() -> SubmissionService:
    """Return the process-wide submission service, building it from settings if needed."""

    global _service
    if _service is None:
        _service = SubmissionService(JsonFileStore(load_settings().db_file))
    return _service


def reset_submission_service() -> None:
    """Forget the configured service (used in tests)."""

    global _service
    _service = None
