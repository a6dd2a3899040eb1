# streamscope/services/probe/ffprobe_adapter.py
from __future__ import annotations

import asyncio
import contextlib
import json
from typing import Any, Dict, Mapping, Optional

from streamscope.common.settings import get_settings
from streamscope.common.logging import get_logger, redact_headers
from streamscope.common.probe.ffprobe_helpers import build_ffprobe_cmd
from streamscope.domain.errors import OutputParseFailed, ProbeFailed, ProbeSpawnFailed, ProbeTimeout
from streamscope.domain.ports.probe import MediaProbePort
from streamscope.services.probe.environment import build_probe_env, resolve_ffprobe_bin

logger = get_logger(__name__)


class FFprobeAdapter(MediaProbePort):
    """
    Infrastructure adapter implementing MediaProbePort using `ffprobe`.
    Each probe() spawns its own process; concurrent calls share nothing.
    """

    def __init__(
        self,
        ffprobe_bin: Optional[str] = None,
        timeout_sec: Optional[float] = None,
        env: Optional[Mapping[str, str]] = None,
    ):
        cfg = get_settings()
        self.env = dict(env) if env is not None else build_probe_env(cfg.ffprobe.extra_path_dirs)
        self.ffprobe_bin = resolve_ffprobe_bin(ffprobe_bin or cfg.ffprobe.bin, self.env)
        self.timeout_sec = float(timeout_sec or cfg.ffprobe.timeout_sec)
        self.log_level = cfg.ffprobe.log_level
        self._redact = cfg.redact_header_list

    # ---- Port API -------------------------------------------------------------
    async def probe(self, url: str, headers: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        cmd = build_ffprobe_cmd(url, ffprobe_bin=self.ffprobe_bin, log_level=self.log_level, headers=headers)
        if headers:
            logger.debug("Using headers for FFprobe request: %s", redact_headers(headers, self._redact))

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=self.env,
            )
        except OSError as e:
            logger.error("FFprobe spawn error: %s", e)
            raise ProbeSpawnFailed(str(e)) from e

        try:
            stdout_b, stderr_b = await asyncio.wait_for(proc.communicate(), timeout=self.timeout_sec)
        except asyncio.TimeoutError as e:
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            await proc.wait()
            logger.error("FFprobe timed out after %ss for %s", self.timeout_sec, url)
            raise ProbeTimeout(self.timeout_sec) from e

        stdout = (stdout_b or b"").decode("utf-8", errors="replace")
        stderr = (stderr_b or b"").decode("utf-8", errors="replace")

        if proc.returncode != 0 or not stdout.strip():
            logger.error("FFprobe failed with code %s: %s", proc.returncode, stderr.strip())
            raise ProbeFailed(stderr=stderr, returncode=proc.returncode)

        try:
            data = json.loads(stdout)
        except json.JSONDecodeError as e:
            logger.error("Error parsing FFprobe output: %s", e)
            raise OutputParseFailed(str(e)) from e
        if not isinstance(data, dict):
            raise OutputParseFailed(f"expected a JSON object, got {type(data).__name__}")
        return data
