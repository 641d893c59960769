"""
timemacro — expand ${date}-style time macros in text against an anchor time.

    >>> from datetime import datetime, timezone
    >>> expand_time_macros("ds = ${date-1}", datetime(2023, 3, 1, tzinfo=timezone.utc))
    'ds = 20230228'
"""

from .core.config import Settings, configure_logging, get_settings
from .macros import (
    FormatterRegistry,
    MacroEngine,
    MacroKind,
    MacroParseError,
    ParsedMacro,
    TimeMacroError,
    expand_time_macros,
    find_macros,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Settings",
    "configure_logging",
    "get_settings",
    "FormatterRegistry",
    "MacroEngine",
    "MacroKind",
    "MacroParseError",
    "ParsedMacro",
    "TimeMacroError",
    "expand_time_macros",
    "find_macros",
]
