import pytest

from streamscope.domain.enums import ManifestType


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://cdn.example.com/live/master.m3u8", ManifestType.hls),
        ("https://cdn.example.com/live/MASTER.M3U8?token=abc", ManifestType.hls),
        ("https://cdn.example.com/vod/manifest.mpd", ManifestType.dash),
        ("https://cdn.example.com/vod/movie.mp4", None),
        ("https://cdn.example.com/vod/movie.mp4?next=a.m3u8", None),
    ],
)
def test_manifest_type_from_url_path(url, expected):
    assert ManifestType.from_url(url) == expected


def test_manifest_type_from_unparsable_url_does_not_raise():
    assert ManifestType.from_url("http://[::1/master.m3u8") == ManifestType.hls
    assert ManifestType.from_url("http://[::1/movie.mp4?x=a.mpd") is None


def test_manifest_type_members():
    assert [m.value for m in ManifestType] == ["hls", "dash"]
