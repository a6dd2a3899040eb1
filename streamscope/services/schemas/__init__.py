from streamscope.services.schemas.analysis import (
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    HeartbeatResponse,
)
__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "ErrorResponse",
    "HeartbeatResponse",
]
