# config.py
"""Settings loaded from TODOCLI_* environment variables."""

import logging
import os
from dataclasses import dataclass

ENV_PREFIX = "TODOCLI"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_DATE_DISPLAY_FORMAT = "%x"  # short numeric date of LC_TIME, set by the CLI

# Due dates are only ever accepted in this shape.
DATE_INPUT_FORMAT = "%d/%m/%Y"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _log_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    date_display_format: str = DEFAULT_DATE_DISPLAY_FORMAT
    desktop_notifications: bool = False


def load_settings() -> Settings:
    return Settings(
        log_level=_log_level(_env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL)),
        date_display_format=_env(_k("DATE_DISPLAY_FORMAT"), DEFAULT_DATE_DISPLAY_FORMAT),
        desktop_notifications=_env_bool(_k("DESKTOP_NOTIFICATIONS"), False),
    )
