from __future__ import annotations

import time

from fastapi import APIRouter, Depends, Request

from formdesk.routes.dependencies import require_bearer

router = APIRouter(tags=["health"])

LIVENESS = {"status": "ok", "service": "formdesk"}


@router.get("/", include_in_schema=False)
@router.get("/health", include_in_schema=False)
@router.get("/api/health")
async def liveness() -> dict:
    return dict(LIVENESS)


@router.get("/admin/health", dependencies=[Depends(require_bearer)])
async def admin_health(request: Request) -> dict:
    started_at = getattr(request.app.state, "started_at", None)
    uptime = time.monotonic() - started_at if started_at is not None else 0.0
    return {"status": "ok", "uptime": round(uptime, 3)}
