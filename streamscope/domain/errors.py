# streamscope/domain/errors.py
from __future__ import annotations

from typing import Optional


class AnalysisError(Exception):
    """Base for every failure an analysis request can end with.

    `message` is safe to show the caller; `detail` holds diagnostics
    (stderr, underlying exception text) meant for logs.
    """

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class UnsupportedScheme(AnalysisError):
    """URL can never be fetched or probed (e.g. a browser blob: reference)."""


class LightParseIndeterminate(AnalysisError):
    """Light classification could not decide; full analysis is required."""

    def __init__(self, message: str = "Light analysis needs full parsing", detail: Optional[str] = None):
        super().__init__(message, detail)


class AnalysisFailed(AnalysisError):
    """Request-level failure with no fallback."""


class LightParseHardError(AnalysisFailed):
    def __init__(self, reason: str, detail: Optional[str] = None):
        self.reason = reason
        super().__init__(f"Light analysis failed: {reason}", detail)


class ProbeSpawnFailed(AnalysisFailed):
    def __init__(self, os_error: str):
        super().__init__(f"Failed to start FFprobe: {os_error}", os_error)


class ProbeFailed(AnalysisFailed):
    def __init__(
        self,
        message: str = "Failed to analyze video",
        stderr: Optional[str] = None,
        returncode: Optional[int] = None,
    ):
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(message, stderr)


class ProbeTimeout(ProbeFailed):
    def __init__(self, timeout_sec: float, stderr: Optional[str] = None):
        self.timeout_sec = timeout_sec
        super().__init__(f"FFprobe timed out after {timeout_sec:g}s", stderr=stderr)


class OutputParseFailed(AnalysisFailed):
    def __init__(self, detail: Optional[str] = None):
        super().__init__("Failed to parse stream info", detail)
