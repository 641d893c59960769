"""
FormatterRegistry — central store of the per-kind output formatters.

A formatter turns the shifted anchor into the replacement text:
    def fmt(dt: datetime, settings: Settings) -> str

Register with the decorator:
    @formatter_registry.register(MacroKind.DATE)
    def date_hyphen(dt, settings):
        return dt.strftime("%Y-%m-%d")

Kind names are case-sensitive: DATE and date are different formatters.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..core.config import Settings
from .kinds import MacroKind

logger = logging.getLogger(__name__)


Formatter = Callable[[datetime, Settings], str]


class FormatterRegistry:
    def __init__(self) -> None:
        self._formatters: dict[MacroKind, Formatter] = {}

    # ---------------------------------------------------------------- register

    def register(self, kind: MacroKind):
        """Decorator that registers a function as the formatter for *kind*."""
        def decorator(fn: Formatter) -> Formatter:
            self._formatters[kind] = fn
            logger.debug("Registered formatter: %s", kind.value)
            return fn
        return decorator

    # ------------------------------------------------------------------ lookup

    def has(self, kind: MacroKind) -> bool:
        return kind in self._formatters

    def format(self, kind: MacroKind, dt: datetime, settings: Settings) -> Optional[str]:
        """Render *dt* for *kind*, or None when no formatter is registered."""
        formatter = self._formatters.get(kind)
        if formatter is None:
            return None
        return formatter(dt, settings)

    # ---------------------------------------------------------- introspection

    def registered_kinds(self) -> list[str]:
        return sorted(k.value for k in self._formatters)


# Singleton shared across the library
formatter_registry = FormatterRegistry()
