# streamscope/services/manifest/light_fetch.py
from __future__ import annotations

import asyncio
from typing import Mapping, Optional

import httpx

from streamscope.common.settings import get_settings
from streamscope.common.logging import get_logger
from streamscope.domain.errors import LightParseIndeterminate
from streamscope.domain.ports.manifest import ManifestFetchPort

logger = get_logger(__name__)


class HttpxRangeFetcher(ManifestFetchPort):
    """
    Default Light-Fetch capability: one ranged GET (`Range: bytes=0-N`)
    against the resource itself, bounded by a total timeout.

    Caller headers are forwarded as-is; User-Agent and Accept get configured
    defaults when absent, Range is always ours. Servers that ignore the range
    are read only up to `max_bytes`.
    Every failure (network, timeout, non-2xx status) becomes
    LightParseIndeterminate so the caller can fall back to full analysis.
    """

    def __init__(
        self,
        timeout_sec: Optional[float] = None,
        user_agent: Optional[str] = None,
        accept: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        cfg = get_settings().light
        self.timeout_sec = float(timeout_sec or cfg.timeout_sec)
        self.user_agent = user_agent or cfg.user_agent
        self.accept = accept or cfg.accept
        self._transport = transport

    def request_headers(self, headers: Optional[Mapping[str, str]], max_bytes: int) -> httpx.Headers:
        h = httpx.Headers(dict(headers or {}))
        h["Range"] = f"bytes=0-{max_bytes - 1}"
        if "user-agent" not in h:
            h["User-Agent"] = self.user_agent
        if "accept" not in h:
            h["Accept"] = self.accept
        return h

    async def fetch_prefix(self, url: str, headers: Optional[Mapping[str, str]], max_bytes: int) -> str:
        req_headers = self.request_headers(headers, max_bytes)
        try:
            return await asyncio.wait_for(self._read_prefix(url, req_headers, max_bytes), timeout=self.timeout_sec)
        except asyncio.TimeoutError as e:
            logger.debug("Light fetch timed out after %ss: %s", self.timeout_sec, url)
            raise LightParseIndeterminate("Light fetch timed out") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("Light fetch failed for %s: %s", url, e)
            raise LightParseIndeterminate("Light fetch failed", detail=str(e)) from e

    async def _read_prefix(self, url: str, headers: httpx.Headers, max_bytes: int) -> str:
        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=httpx.Timeout(self.timeout_sec),
            follow_redirects=True,
        ) as client:
            async with client.stream("GET", url, headers=headers) as resp:
                if not resp.is_success:
                    raise LightParseIndeterminate(f"Light fetch returned HTTP {resp.status_code}")
                buf = bytearray()
                async for chunk in resp.aiter_bytes():
                    buf.extend(chunk)
                    if len(buf) >= max_bytes:
                        break
        return bytes(buf[:max_bytes]).decode("utf-8", errors="replace")
