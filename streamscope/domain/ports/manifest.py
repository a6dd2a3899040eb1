from __future__ import annotations
from typing import Mapping, Optional, Protocol

from streamscope.domain.entities.stream import ManifestClassification


class ManifestFetchPort(Protocol):
    """Light-Fetch capability: read at most `max_bytes` from the start of a resource.

    Implementations raise LightParseIndeterminate for any transport failure.
    """
    async def fetch_prefix(self, url: str, headers: Optional[Mapping[str, str]], max_bytes: int) -> str: ...


class ManifestClassifierPort(Protocol):
    async def light_parse(
        self,
        url: str,
        manifest_type: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ManifestClassification: ...
