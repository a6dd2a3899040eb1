# streamscope/services/api/routers/analysis.py
from __future__ import annotations
from http import HTTPStatus

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from streamscope.common.settings import get_settings
from streamscope.common.logging import get_logger
from streamscope.domain.errors import (
    AnalysisError,
    ProbeTimeout,
    UnsupportedScheme,
)
from streamscope.services.analysis.service import AnalysisService
from streamscope.services.api.deps import get_analysis_service
from streamscope.services.mappers.stream import to_stream_info
from streamscope.services.schemas import AnalyzeRequest, AnalyzeResponse, ErrorResponse

cfg = get_settings()
logger = get_logger(__name__)
router = APIRouter(prefix=f"{cfg.api.prefix}/analysis", tags=["analysis"])


def _status_for(e: AnalysisError) -> HTTPStatus:
    if isinstance(e, UnsupportedScheme):
        return HTTPStatus.UNPROCESSABLE_ENTITY
    if isinstance(e, ProbeTimeout):
        return HTTPStatus.GATEWAY_TIMEOUT
    return HTTPStatus.BAD_GATEWAY


@router.post(
    "",
    response_model=AnalyzeResponse,
    responses={
        HTTPStatus.UNPROCESSABLE_ENTITY.value: {"model": ErrorResponse},
        HTTPStatus.BAD_GATEWAY.value: {"model": ErrorResponse},
        HTTPStatus.GATEWAY_TIMEOUT.value: {"model": ErrorResponse},
    },
)
async def analyze_media(
    payload: AnalyzeRequest,
    svc: AnalysisService = Depends(get_analysis_service),
):
    try:
        descriptor = await svc.analyze(payload.url, light=payload.light, headers=payload.headers)
    except AnalysisError as e:
        if e.detail:
            logger.debug("Analysis of %s failed: %s (%s)", payload.url, e.message, e.detail)
        return JSONResponse(status_code=_status_for(e), content=ErrorResponse(error=e.message).model_dump())
    return AnalyzeResponse(stream_info=to_stream_info(descriptor))
