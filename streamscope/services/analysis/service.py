# streamscope/services/analysis/service.py
from __future__ import annotations

from typing import Iterable, Mapping, Optional

from streamscope.common.settings import get_settings
from streamscope.common.logging import get_logger, redact_headers
from streamscope.common.probe.ffprobe_helpers import normalize_ffprobe
from streamscope.domain.entities.stream import StreamDescriptor
from streamscope.domain.enums.manifest_type import ManifestType
from streamscope.domain.errors import LightParseIndeterminate, UnsupportedScheme
from streamscope.domain.ports.manifest import ManifestClassifierPort
from streamscope.domain.ports.probe import MediaProbePort

logger = get_logger(__name__)


class AnalysisService:
    """
    Picks the cheapest strategy that can answer an analysis request:

    - light mode on an HLS/DASH URL: classify master vs. variant from the
      manifest prefix; if that is indeterminate, fall through;
    - everything else: run the prober and normalize its output.

    Holds no per-request state; one instance can serve concurrent requests.
    """

    def __init__(
        self,
        probe: MediaProbePort,
        classifier: ManifestClassifierPort,
        unsupported_schemes: Optional[Iterable[str]] = None,
        redact: Optional[Iterable[str]] = None,
    ):
        cfg = get_settings()
        self.probe = probe
        self.classifier = classifier
        self.unsupported_schemes = frozenset(
            s.lower() for s in (unsupported_schemes if unsupported_schemes is not None else cfg.unsupported_scheme_list)
        )
        self._redact = list(redact) if redact is not None else cfg.redact_header_list

    def _check_scheme(self, url: str) -> None:
        scheme = url.split(":", 1)[0].strip().lower() if ":" in url else ""
        if scheme in self.unsupported_schemes:
            logger.debug("Cannot analyze %s URLs", scheme)
            raise UnsupportedScheme(f"Cannot analyze {scheme} URLs")

    async def analyze(
        self,
        url: str,
        *,
        light: bool = False,
        headers: Optional[Mapping[str, str]] = None,
    ) -> StreamDescriptor:
        logger.debug("Analyzing media from: %s (%s mode)", url, "light" if light else "full")
        self._check_scheme(url)
        headers = dict(headers or {})
        if headers:
            logger.debug("Received headers: %s", redact_headers(headers, self._redact))

        manifest_type = ManifestType.from_url(url) if light else None
        if manifest_type is not None:
            try:
                result = await self.classifier.light_parse(url, manifest_type.value, headers)
            except LightParseIndeterminate as e:
                logger.debug("Light analysis indeterminate (%s); falling back to full analysis", e.message)
            else:
                return StreamDescriptor.from_classification(result)

        raw = await self.probe.probe(url, headers)
        descriptor = normalize_ffprobe(raw)
        logger.debug("Media analysis complete: %s", url)
        return descriptor
