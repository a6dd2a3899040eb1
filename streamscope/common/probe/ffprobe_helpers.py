# streamscope/common/probe/ffprobe_helpers.py
from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional

from streamscope.common.logging import get_logger
from streamscope.domain.entities.stream import UNKNOWN, AudioCodec, StreamDescriptor, VideoCodec
from streamscope.domain.errors import OutputParseFailed
from streamscope.domain.policies.derived_metrics import (
    estimate_file_size,
    format_bitrate,
    format_duration,
    format_size_mb,
    parse_float,
    parse_frame_rate,
    parse_int,
    parse_positive_int,
    round_half_up,
)

logger = get_logger(__name__)


def format_ffprobe_headers(headers: Optional[Mapping[str, str]]) -> Optional[str]:
    """
    ffprobe takes all HTTP headers in one `-headers` string:
    "Key: Value" pairs joined by CRLF, with a trailing CRLF.
    """
    if not headers:
        return None
    lines = [f"{k}: {v}" for k, v in headers.items()]
    return "\r\n".join(lines) + "\r\n"


def build_ffprobe_cmd(
    url: str,
    *,
    ffprobe_bin: str = "ffprobe",
    log_level: str = "quiet",
    headers: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """
    Build an ffprobe command that emits container + stream JSON.
    The URL is always the final positional argument.
    """
    cmd = [
        ffprobe_bin,
        "-v", log_level,
        "-print_format", "json",
        "-show_streams",
        "-show_format",
    ]
    header_arg = format_ffprobe_headers(headers)
    if header_arg:
        cmd += ["-headers", header_arg]
    cmd.append(url)
    return cmd


def _str_or(x: Any, default: Optional[str]) -> Optional[str]:
    if x is None or x == "":
        return default
    return str(x)


def _video_codec(s: Dict[str, Any]) -> VideoCodec:
    return VideoCodec(
        name=_str_or(s.get("codec_name"), UNKNOWN),
        long_name=_str_or(s.get("codec_long_name"), UNKNOWN),
        profile=_str_or(s.get("profile"), None),
        pixel_format=_str_or(s.get("pix_fmt"), None),
        color_space=_str_or(s.get("color_space"), None),
        bit_depth=_str_or(s.get("bits_per_raw_sample"), None),
    )


def _audio_codec(s: Dict[str, Any]) -> AudioCodec:
    return AudioCodec(
        name=_str_or(s.get("codec_name"), UNKNOWN),
        long_name=_str_or(s.get("codec_long_name"), UNKNOWN),
        profile=_str_or(s.get("profile"), None),
        sample_rate=parse_positive_int(s.get("sample_rate")),
        channels=parse_positive_int(s.get("channels")),
        channel_layout=_str_or(s.get("channel_layout"), None),
        bit_depth=_str_or(s.get("bits_per_raw_sample"), None),
    )


def normalize_ffprobe(data: Any) -> StreamDescriptor:
    """
    Turn `ffprobe -print_format json -show_streams -show_format` output into a
    StreamDescriptor. Pure: safe to call in unit tests with fixture JSON.

    The first video and the first audio stream win; later streams of the same
    type are ignored.
    """
    if not isinstance(data, Mapping):
        raise OutputParseFailed(f"expected a JSON object, got {type(data).__name__}")
    fmt = data.get("format") or {}
    streams = data.get("streams") or []
    if not isinstance(fmt, Mapping) or not isinstance(streams, list):
        raise OutputParseFailed("unexpected 'format'/'streams' shape")

    v_stream = next((s for s in streams if isinstance(s, Mapping) and s.get("codec_type") == "video"), None)
    a_stream = next((s for s in streams if isinstance(s, Mapping) and s.get("codec_type") == "audio"), None)

    fields: Dict[str, Any] = {
        "format": _str_or(fmt.get("format_name"), UNKNOWN),
        "container": _str_or(fmt.get("format_long_name"), UNKNOWN),
        "has_video": v_stream is not None,
        "has_audio": a_stream is not None,
        "is_fully_parsed": True,
    }
    logger.debug("Container: %s", fields["container"])

    if v_stream is not None:
        # prefer the real frame rate; only fall back when it is not reported at all
        rate = v_stream.get("r_frame_rate") or v_stream.get("avg_frame_rate")
        fields.update(
            video_codec=_video_codec(v_stream),
            width=parse_positive_int(v_stream.get("width")),
            height=parse_positive_int(v_stream.get("height")),
            fps=parse_frame_rate(rate),
            video_bitrate=parse_int(v_stream.get("bit_rate")),
        )
        logger.debug(
            "Video stream: codec=%s resolution=%sx%s fps=%s bitrate=%s",
            fields["video_codec"].name, fields["width"], fields["height"],
            fields["fps"], format_bitrate(fields["video_bitrate"]),
        )
    else:
        logger.debug("No video stream found")

    if a_stream is not None:
        fields.update(
            audio_codec=_audio_codec(a_stream),
            audio_bitrate=parse_int(a_stream.get("bit_rate")),
        )
        logger.debug(
            "Audio stream: codec=%s channels=%s sample_rate=%s bitrate=%s",
            fields["audio_codec"].name, fields["audio_codec"].channels,
            fields["audio_codec"].sample_rate, format_bitrate(fields["audio_bitrate"]),
        )
    else:
        logger.debug("No audio stream found")

    total_bitrate = parse_int(fmt.get("bit_rate"))
    raw_duration = parse_float(fmt.get("duration"))
    duration = round_half_up(raw_duration) if raw_duration is not None else None
    size_bytes = parse_int(fmt.get("size"))
    fields.update(total_bitrate=total_bitrate, duration=duration, size_bytes=size_bytes)

    if duration is not None:
        logger.debug("Duration: %s", format_duration(duration))
    if size_bytes is not None:
        logger.debug("Size: %s", format_size_mb(size_bytes))
    else:
        estimated = estimate_file_size(total_bitrate, duration)
        if estimated is not None:
            fields["estimated_file_size_bytes"] = estimated
            logger.debug("Estimated size: %s (bitrate x duration)", format_size_mb(estimated))

    return StreamDescriptor(**fields)
