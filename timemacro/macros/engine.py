"""
MacroEngine
===========
The core expansion loop.  Scans text for ${var...} macros and replaces
each one with the anchor time, shifted by its offsets and formatted by
its kind.

Expansion is a single left-to-right pass; replacement text is never
re-scanned.  An occurrence that cannot be expanded (offset out of range,
arithmetic outside the datetime range, no formatter for its kind) is
left exactly as written.  Nothing is raised to the caller.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Optional

from ..core.config import Settings, get_settings
from .offsets import apply_offsets
from .parser import MACRO_PATTERN, MacroParseError, parse_macro
from .registry import FormatterRegistry, formatter_registry

logger = logging.getLogger(__name__)


class MacroEngine:
    """
    Expand all time macros embedded in a piece of text.

    Usage::

        engine = MacroEngine()
        sql = engine.expand("select * from t where ds = ${date-1}", anchor)
    """

    def __init__(
        self,
        registry: Optional[FormatterRegistry] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._registry = registry or formatter_registry
        self._settings = settings

    @property
    def settings(self) -> Settings:
        if self._settings is not None:
            return self._settings
        return get_settings()

    # ----------------------------------------------------------------- public

    def expand(self, text: str, anchor: datetime) -> str:
        """Return *text* with every expandable macro replaced."""
        if not isinstance(anchor, datetime):
            raise TypeError(f"anchor must be a datetime, not {type(anchor).__name__}")
        if not text:
            return text

        settings = self.settings
        if anchor.tzinfo is None:
            anchor = anchor.replace(tzinfo=settings.tz)

        return MACRO_PATTERN.sub(lambda m: self._expand_match(m, anchor, settings), text)

    # ----------------------------------------------------------------- private

    def _expand_match(self, match: re.Match[str], anchor: datetime, settings: Settings) -> str:
        raw = match.group(0)
        try:
            macro = parse_macro(match)
            shifted = apply_offsets(macro, anchor)
        except MacroParseError as exc:
            logger.debug("Leaving %s unexpanded: %s", raw, exc)
            return raw
        except OverflowError as exc:
            logger.debug("Leaving %s unexpanded: offset out of range (%s)", raw, exc)
            return raw

        try:
            replacement = self._registry.format(macro.kind, shifted, settings)
        except Exception as exc:
            logger.debug(
                "Leaving %s unexpanded: formatter for %s failed (%s)",
                raw, macro.kind.value, exc, exc_info=True,
            )
            return raw

        if replacement is None:
            logger.debug("Leaving %s unexpanded: no formatter for %s", raw, macro.kind.value)
            return raw
        return replacement


def expand_time_macros(text: str, anchor: datetime) -> str:
    """Expand *text* against *anchor* with the default engine."""
    return MacroEngine().expand(text, anchor)
