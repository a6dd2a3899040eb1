# streamscope/services/mappers/stream.py
from __future__ import annotations

from typing import Any, Dict, Optional

from streamscope.domain.entities.stream import AudioCodec, StreamDescriptor, VideoCodec


def _video_codec_payload(c: VideoCodec) -> Dict[str, Any]:
    return {
        "name": c.name,
        "longName": c.long_name,
        "profile": c.profile,
        "pixelFormat": c.pixel_format,
        "colorSpace": c.color_space,
        "bitDepth": c.bit_depth,
    }


def _audio_codec_payload(c: AudioCodec) -> Dict[str, Any]:
    return {
        "name": c.name,
        "longName": c.long_name,
        "profile": c.profile,
        "sampleRate": c.sample_rate,
        "channels": c.channels,
        "channelLayout": c.channel_layout,
        "bitDepth": c.bit_depth,
    }


def _put(out: Dict[str, Any], key: str, value: Optional[Any]) -> None:
    if value is not None:
        out[key] = value


def to_stream_info(d: StreamDescriptor) -> Dict[str, Any]:
    """
    Wire form of a StreamDescriptor (camelCase keys).
    Absent optional values are omitted, except width/height/fps which are
    always reported (possibly null) once a video stream exists.
    """
    out: Dict[str, Any] = {
        "format": d.format,
        "container": d.container,
        "hasVideo": d.has_video,
        "hasAudio": d.has_audio,
    }
    if d.is_light_parsed:
        out.update(
            type=d.manifest_type,
            isMaster=bool(d.is_master),
            isVariant=bool(d.is_variant),
            isLightParsed=True,
        )
        return out

    if d.has_video:
        out.update(width=d.width, height=d.height, fps=d.fps)
    if d.video_codec is not None:
        out["videoCodec"] = _video_codec_payload(d.video_codec)
    if d.audio_codec is not None:
        out["audioCodec"] = _audio_codec_payload(d.audio_codec)
    _put(out, "videoBitrate", d.video_bitrate)
    _put(out, "audioBitrate", d.audio_bitrate)
    _put(out, "totalBitrate", d.total_bitrate)
    _put(out, "duration", d.duration)
    _put(out, "sizeBytes", d.size_bytes)
    _put(out, "estimatedFileSizeBytes", d.estimated_file_size_bytes)
    out["isFullyParsed"] = True
    return out
