from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from falvideo.app.config import PLUGIN_NAME

router = APIRouter(tags=["status"])


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/status", name="api-status")
def status_api():
    return {
        "status": "ok",
        "plugin": PLUGIN_NAME,
        "timestamp": utc_now_iso(),
    }
