#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Library configuration.

All values can be overridden via TIMEMACRO_* environment variables or a .env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from datetime import tzinfo
from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="TIMEMACRO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Anchor handling ────────────────────────────────────────────────────

    default_timezone: str = "UTC"   # applied to naive anchors

    # ── Formatting ─────────────────────────────────────────────────────────

    # "weekday" keeps the historical ${week_of_year} output (0=Sunday..6)
    week_of_year_mode: Literal["weekday", "iso_week"] = "weekday"

    # ── Logging ────────────────────────────────────────────────────────────

    log_level: str = "WARNING"

    @field_validator("default_timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise ValueError(f"unknown timezone: {value!r}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @property
    def tz(self) -> tzinfo:
        return ZoneInfo(self.default_timezone)


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured level to the package logger."""
    settings = settings or get_settings()
    logging.getLogger("timemacro").setLevel(settings.log_level)


# -----------------------------------------------------------------------------

