from __future__ import annotations
from typing import Any, Dict, Mapping, Optional, Protocol


class MediaProbePort(Protocol):
    async def probe(self, url: str, headers: Optional[Mapping[str, str]] = None) -> Dict[str, Any]: ...
