from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from formdesk.application import get_submission_service
from formdesk.domain import SubmissionNotFoundError
from formdesk.routes.dependencies import require_bearer

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_bearer)])


@router.get("/submissions")
async def list_submissions() -> dict:
    service = get_submission_service()
    return {"items": [item.to_payload() for item in service.list_submissions()]}


@router.post("/submissions/{submission_id}/approve")
async def approve_submission(submission_id: str) -> dict:
    service = get_submission_service()
    try:
        service.approve(submission_id)
    except SubmissionNotFoundError as exc:
        raise HTTPException(status_code=404, detail="submission not found") from exc
    return {"ok": True}


@router.post("/submissions/{submission_id}/reject")
async def reject_submission(submission_id: str) -> dict:
    service = get_submission_service()
    try:
        service.reject(submission_id)
    except SubmissionNotFoundError as exc:
        raise HTTPException(status_code=404, detail="submission not found") from exc
    return {"ok": True}


@router.get("/logs")
async def list_logs() -> dict:
    service = get_submission_service()
    return {"logs": [entry.to_payload() for entry in service.list_logs()]}
