# streamscope/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter
from streamscope.common.settings import get_settings
from streamscope.common.logging import get_logger
from streamscope.services.schemas import HeartbeatResponse

cfg = get_settings()
logger = get_logger(__name__)
router = APIRouter(tags=["health"])

@router.get("/healthz")
def healthz():
    s = get_settings()
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
    }

@router.post(f"{cfg.api.prefix}/heartbeat", response_model=HeartbeatResponse)
def heartbeat() -> HeartbeatResponse:
    logger.debug("Received heartbeat")
    return HeartbeatResponse()
