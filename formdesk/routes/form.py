from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from formdesk.application import get_submission_service

router = APIRouter(prefix="/api/form", tags=["form"])


@router.post("/submit")
async def submit_form(payload: dict[str, Any]) -> dict:
    """Accept an open form payload and queue it for review."""
    service = get_submission_service()
    submission = service.submit(payload)
    return {"ok": True, "id": submission.id}
