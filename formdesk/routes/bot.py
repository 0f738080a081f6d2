from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from formdesk.application import get_submission_service
from formdesk.domain import SubmissionNotFoundError
from formdesk.routes.dependencies import require_bearer

router = APIRouter(prefix="/bot", tags=["bot"], dependencies=[Depends(require_bearer)])


@router.get("/approved")
async def list_approved() -> dict:
    """Approved submissions the bot has not handled yet."""
    service = get_submission_service()
    return {"items": [item.to_payload() for item in service.list_approved_pending()]}


@router.post("/mark-done")
async def mark_done(payload: dict[str, Any]) -> dict:
    submission_id = payload.get("id")
    if submission_id is None or submission_id == "":
        raise HTTPException(status_code=400, detail="id is required")
    service = get_submission_service()
    try:
        service.mark_done(str(submission_id))
    except SubmissionNotFoundError as exc:
        raise HTTPException(status_code=404, detail="submission not found") from exc
    return {"ok": True}
