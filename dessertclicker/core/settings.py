from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DARK_MODE_ENV = "DESSERTCLICKER_DARK_MODE"
LOG_LEVEL_ENV = "DESSERTCLICKER_LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Start-up options read from the environment."""

    dark_mode: bool = False
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        dark_mode = env.get(DARK_MODE_ENV, "").strip().lower() in _TRUTHY

        level_name = env.get(LOG_LEVEL_ENV, "INFO").strip().upper() or "INFO"
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"{LOG_LEVEL_ENV}: unknown log level '{level_name}'")
        return cls(dark_mode=dark_mode, log_level=level)
