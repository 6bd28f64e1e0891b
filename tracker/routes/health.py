import os
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from tracker.meetings.selectors import history, upcoming
from tracker.meetings.store import get_meeting_store
from tracker.observability.logger import init_sentry

router = APIRouter()


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def get_last_change() -> Optional[Dict[str, Any]]:
    """Describe the most recent store mutation, if any."""
    change = get_meeting_store().last_change
    if change is None:
        return None
    return {
        "action": change.action,
        "count": len(change.meeting_ids),
        "size": change.size,
        "time": change.changed_at.isoformat(),
    }


@router.get("/healthz")
async def health_check() -> JSONResponse:
    """
    Health check with store counts and the last mutation.

    Returns:
        JSON response with status, store summary and observability flags
    """
    snapshot = get_meeting_store().snapshot()
    response = {
        "status": "ok",
        "timestamp": _utc_now_iso(),
        "store": {
            "size": len(snapshot),
            "upcoming": len(upcoming(snapshot)),
            "history": len(history(snapshot)),
        },
    }

    last_change = get_last_change()
    if last_change:
        response["last_change"] = last_change

    obs_enabled = os.getenv("OBS_ENABLED", "false").lower() == "true"
    response["observability"] = {
        "enabled": obs_enabled,
        "sentry_configured": bool(os.getenv("SENTRY_DSN")),
    }

    return JSONResponse(status_code=200, content=response)


@router.get("/healthz/ready")
async def readiness_check() -> JSONResponse:
    """Readiness check: the store can be reached."""
    checks = {"store": "ok"}
    try:
        get_meeting_store()
    except Exception:
        checks["store"] = "error"

    all_healthy = all(status == "ok" for status in checks.values())

    response = {
        "status": "ready" if all_healthy else "not_ready",
        "timestamp": _utc_now_iso(),
        "checks": checks,
    }

    status_code = 200 if all_healthy else 503
    return JSONResponse(status_code=status_code, content=response)


@router.get("/healthz/live")
async def liveness_check() -> JSONResponse:
    response = {
        "status": "alive",
        "timestamp": _utc_now_iso(),
    }
    return JSONResponse(status_code=200, content=response)


# Initialize Sentry on module import if enabled
init_sentry()
