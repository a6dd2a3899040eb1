# streamscope/domain/policies/derived_metrics.py
"""
Pure helpers that turn raw ffprobe values into the numbers a StreamDescriptor
carries, plus the human-readable forms used in analysis logs.

ffprobe reports almost everything as strings ("1920", "8000000", "30000/1001",
"N/A"), so every parser here returns None instead of raising.
"""
from __future__ import annotations

import math
from typing import Any, Optional


def parse_float(x: Any) -> Optional[float]:
    if x is None or isinstance(x, bool):
        return None
    try:
        v = float(x)
    except (TypeError, ValueError):
        return None
    return v if math.isfinite(v) else None


def parse_int(x: Any) -> Optional[int]:
    v = parse_float(x)
    return int(v) if v is not None else None


def parse_positive_int(x: Any) -> Optional[int]:
    """Like parse_int, but 0 and negatives mean "not reported"."""
    v = parse_int(x)
    if v is None or v <= 0:
        return None
    return v


def round_half_up(x: float) -> int:
    # builtin round() is banker's rounding; 2.5s must become 3s
    return int(math.floor(x + 0.5))


def parse_frame_rate(rate: Optional[str]) -> Optional[int]:
    """
    "30000/1001" -> 30. None when the fraction is missing, non-numeric,
    has a zero denominator, or describes zero frames per second.
    """
    if not rate or not isinstance(rate, str) or "/" not in rate:
        return None
    num_s, den_s = rate.split("/", 1)
    num, den = parse_float(num_s), parse_float(den_s)
    if num is None or den is None or den == 0 or num == 0:
        return None
    return round_half_up(num / den)


def estimate_file_size(total_bitrate: Optional[int], duration: Optional[int]) -> Optional[int]:
    """bits/s x seconds / 8 = bytes. Needs both inputs."""
    if not total_bitrate or not duration:
        return None
    return round_half_up(total_bitrate * duration / 8)


def format_duration(seconds: int) -> str:
    hours, rem = divmod(int(seconds), 3600)
    minutes, secs = divmod(rem, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_size_mb(size_bytes: int) -> str:
    return f"{size_bytes / (1024 * 1024):.1f}MB"


def format_bitrate(bps: Optional[int]) -> str:
    if not bps:
        return "unknown"
    if bps >= 1_000_000:
        return f"{bps / 1_000_000:.2f}Mbps"
    return f"{bps / 1000:.0f}kbps"
