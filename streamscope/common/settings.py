# streamscope/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from streamscope.common.strings.splitters import csv_to_list


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False


class FFProbeConfig(BaseModel):
    bin: str = "ffprobe"
    timeout_sec: float = Field(30.0, gt=0, description="Hard bound on a single ffprobe run")
    log_level: str = "quiet"  # quiet|panic|fatal|error|warning|info|verbose|debug|trace
    # CSV of directories prepended to PATH when spawning ffprobe
    extra_path: str = "/usr/local/bin,/opt/homebrew/bin,/opt/local/bin"

    @computed_field  # type: ignore[misc]
    @property
    def extra_path_dirs(self) -> List[str]:
        return csv_to_list(self.extra_path)


class LightFetchConfig(BaseModel):
    max_bytes: int = Field(2048, ge=1, description="Manifest prefix size requested by light analysis")
    timeout_sec: float = Field(5.0, gt=0)
    user_agent: str = "Mozilla/5.0"
    accept: str = "*/*"


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "streamscope"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    ffprobe: FFProbeConfig = FFProbeConfig()
    light: LightFetchConfig = LightFetchConfig()

    # -------- Analysis rules (CSV) --------
    unsupported_schemes: str = Field("blob,filesystem", description="URL schemes that can never be fetched or probed")
    redact_headers: str = Field(
        "authorization,proxy-authorization,cookie,x-api-key",
        description="Header names whose values are masked in logs",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @computed_field  # type: ignore[misc]
    @property
    def unsupported_scheme_list(self) -> List[str]:
        return [s.rstrip(":") for s in csv_to_list(self.unsupported_schemes, lower=True)]

    @computed_field  # type: ignore[misc]
    @property
    def redact_header_list(self) -> List[str]:
        return csv_to_list(self.redact_headers, lower=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from streamscope.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
