"""
Macro subsystem — public API.
"""

from .kinds import MacroKind
from .parser import MacroParseError, ParsedMacro, TimeMacroError, find_macros, parse_macro
from .registry import FormatterRegistry, formatter_registry
from .engine import MacroEngine, expand_time_macros
from .builtins import register_all_builtins

register_all_builtins()

__all__ = [
    "MacroKind",
    "ParsedMacro",
    "TimeMacroError",
    "MacroParseError",
    "parse_macro",
    "find_macros",
    "FormatterRegistry",
    "formatter_registry",
    "MacroEngine",
    "expand_time_macros",
    "register_all_builtins",
]
