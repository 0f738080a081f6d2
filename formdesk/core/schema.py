from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SubmissionStatus = Literal["pending", "approved", "rejected"]
LogType = Literal["submit", "approve", "reject", "done"]

RESERVED_SUBMISSION_KEYS = frozenset(
    {"id", "status", "done", "createdAt", "updatedAt", "created_at", "updated_at"}
)


class Submission(BaseModel):
    """A form submission; fields beyond the core record are kept as extras."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    status: SubmissionStatus = "pending"
    done: bool = False
    created_at: int = Field(alias="createdAt")
    updated_at: int = Field(alias="updatedAt")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class LogEntry(BaseModel):
    type: LogType
    id: str
    time: int

    def to_payload(self) -> dict:
        return self.model_dump()


class Document(BaseModel):
    submissions: list[Submission] = Field(default_factory=list)
    logs: list[LogEntry] = Field(default_factory=list)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)
