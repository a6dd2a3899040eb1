# tests/conftest.py
from __future__ import annotations
import copy
import pytest

from streamscope.common import settings as settings_mod

FFPROBE_VIDEO_AUDIO = {
    "streams": [
        {
            "index": 0,
            "codec_type": "video",
            "codec_name": "h264",
            "codec_long_name": "H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10",
            "profile": "High",
            "width": 1920,
            "height": 1080,
            "pix_fmt": "yuv420p",
            "color_space": "bt709",
            "bits_per_raw_sample": "8",
            "r_frame_rate": "30000/1001",
            "avg_frame_rate": "30000/1001",
            "bit_rate": "7800000",
        },
        {
            "index": 1,
            "codec_type": "audio",
            "codec_name": "aac",
            "codec_long_name": "AAC (Advanced Audio Coding)",
            "profile": "LC",
            "sample_rate": "48000",
            "channels": 2,
            "channel_layout": "stereo",
            "bit_rate": "192000",
        },
    ],
    "format": {
        "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
        "format_long_name": "QuickTime / MOV",
        "duration": "120.000000",
        "bit_rate": "8000000",
    },
}


@pytest.fixture(autouse=True)
def _fresh_settings():
    # every test sees settings built from its own environment
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture()
def ffprobe_json() -> dict:
    return copy.deepcopy(FFPROBE_VIDEO_AUDIO)
