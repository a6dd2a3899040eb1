# streamscope/domain/entities/stream.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

UNKNOWN = "unknown"


@dataclass(frozen=True)
class VideoCodec:
    name: str = UNKNOWN
    long_name: str = UNKNOWN
    profile: Optional[str] = None
    pixel_format: Optional[str] = None
    color_space: Optional[str] = None
    bit_depth: Optional[str] = None


@dataclass(frozen=True)
class AudioCodec:
    name: str = UNKNOWN
    long_name: str = UNKNOWN
    profile: Optional[str] = None
    sample_rate: Optional[int] = None
    channels: Optional[int] = None
    channel_layout: Optional[str] = None
    bit_depth: Optional[str] = None


@dataclass(frozen=True)
class ManifestClassification:
    """Answer of a light analysis: master manifest or single variant."""
    is_master: bool
    type: str

    @property
    def is_variant(self) -> bool:
        return not self.is_master


@dataclass(frozen=True)
class StreamDescriptor:
    """
    Normalized result of one analysis request.
    Built either from a full ffprobe run (is_fully_parsed) or from a light
    manifest classification (is_light_parsed), never both.
    """
    format: str = UNKNOWN
    container: str = UNKNOWN
    has_video: bool = False
    has_audio: bool = False

    video_codec: Optional[VideoCodec] = None
    audio_codec: Optional[AudioCodec] = None
    width: Optional[int] = None
    height: Optional[int] = None
    fps: Optional[int] = None

    video_bitrate: Optional[int] = None
    audio_bitrate: Optional[int] = None
    total_bitrate: Optional[int] = None
    duration: Optional[int] = None
    size_bytes: Optional[int] = None
    estimated_file_size_bytes: Optional[int] = None

    is_fully_parsed: bool = False
    is_light_parsed: bool = False

    # light path only
    is_master: Optional[bool] = None
    is_variant: Optional[bool] = None
    manifest_type: Optional[str] = None

    def __post_init__(self) -> None:
        if self.is_fully_parsed == self.is_light_parsed:
            raise ValueError("exactly one of is_fully_parsed / is_light_parsed must be set")
        if self.is_master and self.is_variant:
            raise ValueError("a manifest cannot be both master and variant")
        if self.estimated_file_size_bytes is not None and self.size_bytes is not None:
            raise ValueError("estimated size is only derived when the exact size is unknown")

    @property
    def is_low_confidence(self) -> bool:
        return not (self.has_video or self.has_audio)

    @classmethod
    def from_classification(cls, c: ManifestClassification) -> "StreamDescriptor":
        # light analysis never looks at streams; assume both are present
        return cls(
            format=c.type,
            container=c.type,
            has_video=True,
            has_audio=True,
            is_light_parsed=True,
            is_master=c.is_master,
            is_variant=c.is_variant,
            manifest_type=c.type,
        )
