# services/schemas/analysis.py
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    url: str = Field(..., min_length=1, examples=["https://cdn.example.com/live/master.m3u8"])
    light: bool = Field(False, description="Only classify HLS/DASH manifests as master or variant when possible")
    headers: Dict[str, str] = Field(
        default_factory=dict,
        description="HTTP headers forwarded to the light fetch and to ffprobe",
        examples=[{"User-Agent": "Mozilla/5.0", "Referer": "https://example.com/"}],
    )


class AnalyzeResponse(BaseModel):
    stream_info: Dict[str, Any] = Field(..., alias="streamInfo")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    error: str


class HeartbeatResponse(BaseModel):
    type: str = "heartbeat"
    alive: bool = True
