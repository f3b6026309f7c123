"""Process-level settings, read once from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_PYTHON = "python3"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    home: Path | None = None
    shell: str = ""
    python: str = DEFAULT_PYTHON
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            shell=env.get("SHELL", ""),
            python=env.get("VENGO_PYTHON") or DEFAULT_PYTHON,
            log_level=env.get("VENGO_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
        )
