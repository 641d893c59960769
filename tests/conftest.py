#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Test fixtures
=============
Anchors are fixed instants so every expected value can be written out by
hand.  The settings cache is cleared around each test so environment
overrides made with monkeypatch never leak between tests.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from timemacro.core.config import Settings, get_settings
from timemacro.macros import MacroEngine


# ── Keep TIMEMACRO_* settings isolated per test ──────────────────────────────
@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    for name in ("TIMEMACRO_DEFAULT_TIMEZONE", "TIMEMACRO_WEEK_OF_YEAR_MODE", "TIMEMACRO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ── The reference business date used throughout the suite ────────────────────
@pytest.fixture
def anchor() -> datetime:
    """2023-02-28 00:00 UTC (a Tuesday, ISO week 9)."""
    return datetime(2023, 2, 28, tzinfo=timezone.utc)


@pytest.fixture
def engine() -> MacroEngine:
    return MacroEngine(settings=Settings())
