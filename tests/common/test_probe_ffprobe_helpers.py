import pytest

from streamscope.common.probe.ffprobe_helpers import (
    build_ffprobe_cmd,
    format_ffprobe_headers,
    normalize_ffprobe,
)
from streamscope.domain.errors import OutputParseFailed


def test_build_ffprobe_cmd_uses_json_flags():
    url = "https://cdn.example.com/video.mp4"
    cmd = build_ffprobe_cmd(url, ffprobe_bin="/usr/bin/ffprobe")
    assert cmd[0] == "/usr/bin/ffprobe"
    assert cmd[1:3] == ["-v", "quiet"]
    assert cmd[cmd.index("-print_format") + 1] == "json"
    assert "-show_streams" in cmd
    assert "-show_format" in cmd
    assert "-headers" not in cmd
    assert cmd[-1] == url


def test_build_ffprobe_cmd_injects_headers_before_url():
    url = "https://cdn.example.com/video.mp4"
    cmd = build_ffprobe_cmd(url, headers={"User-Agent": "UA", "Referer": "https://example.com/"})
    i = cmd.index("-headers")
    assert cmd[i + 1] == "User-Agent: UA\r\nReferer: https://example.com/\r\n"
    assert cmd[-1] == url


def test_format_ffprobe_headers():
    assert format_ffprobe_headers(None) is None
    assert format_ffprobe_headers({}) is None
    assert format_ffprobe_headers({"Cookie": "a=1"}) == "Cookie: a=1\r\n"


def test_normalize_video_and_audio(ffprobe_json):
    d = normalize_ffprobe(ffprobe_json)
    assert d.is_fully_parsed is True
    assert d.is_light_parsed is False
    assert d.has_video is True and d.has_audio is True
    assert d.format == "mov,mp4,m4a,3gp,3g2,mj2"
    assert d.container == "QuickTime / MOV"
    assert (d.width, d.height) == (1920, 1080)
    assert d.fps == 30
    assert d.video_codec.name == "h264"
    assert d.video_codec.pixel_format == "yuv420p"
    assert d.video_codec.color_space == "bt709"
    assert d.video_codec.bit_depth == "8"
    assert d.audio_codec.name == "aac"
    assert d.audio_codec.sample_rate == 48000
    assert d.audio_codec.channels == 2
    assert d.audio_codec.channel_layout == "stereo"
    assert d.video_bitrate == 7_800_000
    assert d.audio_bitrate == 192_000
    assert d.total_bitrate == 8_000_000
    assert d.duration == 120
    assert d.size_bytes is None
    assert d.estimated_file_size_bytes == 120_000_000


def test_normalize_exact_size_wins_over_estimate(ffprobe_json):
    ffprobe_json["format"]["size"] = "119000000"
    d = normalize_ffprobe(ffprobe_json)
    assert d.size_bytes == 119_000_000
    assert d.estimated_file_size_bytes is None


def test_normalize_no_estimate_without_bitrate(ffprobe_json):
    del ffprobe_json["format"]["bit_rate"]
    d = normalize_ffprobe(ffprobe_json)
    assert d.total_bitrate is None
    assert d.estimated_file_size_bytes is None


def test_normalize_audio_only(ffprobe_json):
    ffprobe_json["streams"] = [s for s in ffprobe_json["streams"] if s["codec_type"] == "audio"]
    d = normalize_ffprobe(ffprobe_json)
    assert d.has_video is False
    assert d.video_codec is None
    assert d.fps is None and d.width is None
    assert d.has_audio is True
    assert d.audio_codec is not None


def test_normalize_defaults_for_missing_fields():
    d = normalize_ffprobe({"streams": [{"codec_type": "video"}, {"codec_type": "audio"}], "format": {}})
    assert d.format == "unknown"
    assert d.container == "unknown"
    assert d.video_codec.name == "unknown"
    assert d.video_codec.long_name == "unknown"
    # codec properties are null, not placeholder strings
    assert d.video_codec.profile is None
    assert d.video_codec.pixel_format is None
    assert d.video_codec.color_space is None
    assert d.video_codec.bit_depth is None
    assert d.audio_codec.sample_rate is None
    assert d.fps is None
    assert d.duration is None
    assert d.video_bitrate is None


def test_normalize_first_stream_of_a_type_wins(ffprobe_json):
    ffprobe_json["streams"].append({"codec_type": "video", "codec_name": "mjpeg", "width": 320, "height": 240})
    d = normalize_ffprobe(ffprobe_json)
    assert d.video_codec.name == "h264"
    assert d.width == 1920


def test_normalize_prefers_real_frame_rate(ffprobe_json):
    v = ffprobe_json["streams"][0]
    v["r_frame_rate"] = "50/1"
    v["avg_frame_rate"] = "25/1"
    assert normalize_ffprobe(ffprobe_json).fps == 50

    del v["r_frame_rate"]
    assert normalize_ffprobe(ffprobe_json).fps == 25


def test_normalize_rounds_duration_half_up(ffprobe_json):
    ffprobe_json["format"]["duration"] = "10.5"
    assert normalize_ffprobe(ffprobe_json).duration == 11


@pytest.mark.parametrize("bad", [[], "text", None, {"streams": {"0": {}}}, {"format": ["x"]}])
def test_normalize_rejects_bad_shapes(bad):
    with pytest.raises(OutputParseFailed):
        normalize_ffprobe(bad)
