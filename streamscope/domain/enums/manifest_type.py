from __future__ import annotations
from enum import StrEnum
from typing import Optional
from urllib.parse import urlsplit


class ManifestType(StrEnum):
    hls = "hls"
    dash = "dash"

    @classmethod
    def from_url(cls, url: str) -> Optional["ManifestType"]:
        """HLS/DASH by the extension in the URL path; None for anything else."""
        try:
            path = urlsplit(url).path
        except ValueError:
            # unparsable (e.g. broken IPv6 host); the classifier reports it
            path = url.split("?", 1)[0].split("#", 1)[0]
        path = path.lower()
        if ".m3u8" in path:
            return cls.hls
        if ".mpd" in path:
            return cls.dash
        return None
