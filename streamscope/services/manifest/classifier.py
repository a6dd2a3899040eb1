# streamscope/services/manifest/classifier.py
from __future__ import annotations

from typing import Mapping, Optional
from urllib.parse import urlsplit

from streamscope.common.settings import get_settings
from streamscope.common.logging import get_logger
from streamscope.domain.entities.stream import ManifestClassification
from streamscope.domain.enums.manifest_type import ManifestType
from streamscope.domain.errors import LightParseHardError, LightParseIndeterminate
from streamscope.domain.ports.manifest import ManifestClassifierPort, ManifestFetchPort
from streamscope.services.manifest.light_fetch import HttpxRangeFetcher

logger = get_logger(__name__)

HLS_MASTER_TAG = "#EXT-X-STREAM-INF:"
DASH_ADAPTATION_TAG = "<AdaptationSet"
DASH_REPRESENTATION_TAG = "<Representation"


def classify_manifest(text: str, manifest_type: str) -> ManifestClassification:
    """
    Master vs. variant from indicator tokens in a manifest prefix.
    Nothing else about the manifest is checked.
    """
    if manifest_type == ManifestType.hls:
        return ManifestClassification(is_master=HLS_MASTER_TAG in text, type=ManifestType.hls.value)
    if manifest_type == ManifestType.dash:
        is_master = DASH_ADAPTATION_TAG in text and DASH_REPRESENTATION_TAG in text
        return ManifestClassification(is_master=is_master, type=ManifestType.dash.value)
    raise LightParseIndeterminate(f"Unrecognized manifest type: {manifest_type!r}")


def _validate_url(url: str) -> None:
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError as e:
        raise LightParseHardError(f"malformed URL: {e}") from e
    if not parts.scheme:
        raise LightParseHardError("URL has no scheme")
    if not host:
        raise LightParseHardError("URL has no host")
    if parts.scheme not in ("http", "https"):
        # well-formed but not fetchable over HTTP; ffprobe may still read it
        raise LightParseIndeterminate(f"no light fetch for {parts.scheme} URLs")


class LightManifestClassifier(ManifestClassifierPort):
    """
    Answers one question from the first bytes of a manifest:
    is it a master playlist or a single variant?
    """

    def __init__(self, fetcher: Optional[ManifestFetchPort] = None, max_bytes: Optional[int] = None):
        self.fetcher = fetcher or HttpxRangeFetcher()
        self.max_bytes = int(max_bytes or get_settings().light.max_bytes)

    async def light_parse(
        self,
        url: str,
        manifest_type: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ManifestClassification:
        _validate_url(url)
        if manifest_type not in (ManifestType.hls, ManifestType.dash):
            raise LightParseIndeterminate(f"Unrecognized manifest type: {manifest_type!r}")

        logger.debug("[LIGHT-ANALYSIS] Starting light analysis for %s (%s)", url, manifest_type)
        text = await self.fetcher.fetch_prefix(url, headers, self.max_bytes)
        result = classify_manifest(text, manifest_type)
        logger.debug(
            "[LIGHT-ANALYSIS] Success for %s: isMaster=%s, isVariant=%s",
            url, result.is_master, result.is_variant,
        )
        return result
