# streamscope/common/logging.py
from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

REDACTED = "***"


def get_logger(name: str = "streamscope", level: Optional[int | str] = None) -> logging.Logger:
    """
    Return a logger that plays nice with Uvicorn if running under it.
    If no handlers are set, we add a basicConfig once.
    Level defaults to Settings.log_level.
    """
    if level is None:
        from streamscope.common.settings import get_settings

        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger


def redact_headers(headers: Mapping[str, str] | None, sensitive: Iterable[str]) -> dict[str, str]:
    """Copy of `headers` safe for logging: values of sensitive names are masked."""
    if not headers:
        return {}
    names = {s.lower() for s in sensitive}
    return {k: (REDACTED if k.lower() in names else v) for k, v in headers.items()}
