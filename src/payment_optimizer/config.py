# src/payment_optimizer/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_POINTS_METHOD_ID = "PUNKTY"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_POINTS_METHOD_ID = "PAYMENT_OPTIMIZER_POINTS_ID"
ENV_LOG_LEVEL = "PAYMENT_OPTIMIZER_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    points_method_id: str = DEFAULT_POINTS_METHOD_ID
    log_level: str = DEFAULT_LOG_LEVEL


def _env_str(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def _env_log_level(name, default):
    level = _env_str(name, default).upper()
    return level if level in LOG_LEVELS else default


@lru_cache(maxsize=1)
def get_settings(env_file: str | None = None) -> Settings:
    """Build settings from the environment, after loading ``.env`` if present.

    Without ``env_file`` the ``.env`` in the current working directory is used.
    Variables already set in the environment win over the file; an unknown
    log level falls back to the default.
    """
    load_dotenv(dotenv_path=Path(env_file) if env_file else Path.cwd() / ".env", override=False)
    return Settings(
        points_method_id=_env_str(ENV_POINTS_METHOD_ID, DEFAULT_POINTS_METHOD_ID),
        log_level=_env_log_level(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
    )
