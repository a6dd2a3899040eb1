# streamscope/services/probe/environment.py
from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional


def build_probe_env(extra_path: Iterable[str] = (), base: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Full environment for the ffprobe child process: a copy of `base`
    (os.environ by default) whose PATH is prefixed with every existing
    directory in `extra_path` not already on it.
    """
    env = dict(os.environ if base is None else base)
    current = [p for p in env.get("PATH", "").split(os.pathsep) if p]
    extra = [d for d in extra_path if d and d not in current and Path(d).is_dir()]
    env["PATH"] = os.pathsep.join(extra + current)
    return env


def resolve_ffprobe_bin(candidate: str, env: Mapping[str, str]) -> str:
    """
    Absolute path of `candidate` on env's PATH. An unresolvable name is
    returned unchanged so the spawn itself reports the OS error.
    """
    if os.path.isabs(candidate):
        return candidate
    return shutil.which(candidate, path=env.get("PATH")) or candidate
