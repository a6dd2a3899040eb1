from streamscope.common.settings import get_settings


def test_settings_defaults():
    cfg = get_settings()
    assert cfg.light.max_bytes == 2048
    assert cfg.light.timeout_sec == 5.0
    assert cfg.light.user_agent == "Mozilla/5.0"
    assert cfg.ffprobe.log_level == "quiet"
    assert cfg.ffprobe.timeout_sec > 0
    assert "blob" in cfg.unsupported_scheme_list
    assert "authorization" in cfg.redact_header_list


def test_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("UNSUPPORTED_SCHEMES", "Blob:, data")
    monkeypatch.setenv("FFPROBE__TIMEOUT_SEC", "12")
    monkeypatch.setenv("FFPROBE__EXTRA_PATH", "/opt/ffmpeg/bin, /srv/bin")
    monkeypatch.setenv("LIGHT__USER_AGENT", "streamscope-test")

    cfg = get_settings()
    assert cfg.unsupported_scheme_list == ["blob", "data"]
    assert cfg.ffprobe.timeout_sec == 12
    assert cfg.ffprobe.extra_path_dirs == ["/opt/ffmpeg/bin", "/srv/bin"]
    assert cfg.light.user_agent == "streamscope-test"


def test_settings_are_cached():
    assert get_settings() is get_settings()
