"""
Macro parser
============
Recognises ${var[+n][+Nm][+Nd][+Nh][+Ns]} occurrences and turns each one
into a ParsedMacro.

  ${date}            — no offsets
  ${date-3}          — primary offset, unit depends on the kind
  ${date-3+1m+2d}    — primary offset, then one month, then two days
  ${hour+2h-30s}     — suffix terms only

Suffix terms are optional but must appear in m, d, h, s order; anything
else is not a macro and is left alone by the engine.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .kinds import RECOGNISED_KINDS, MacroKind

# ---------------------------------------------------------------------------
# Pattern explanation:
#   ${              literal opener
#   (?P<var>...)    one of the recognised kind names (case-sensitive)
#   (?P<offset>)    bare signed integer, no unit
#   (?P<month>)m  (?P<day>)d  (?P<hour>)h  (?P<second>)s
#   }               literal closer
#
# re.ASCII keeps \d to 0-9.
# ---------------------------------------------------------------------------
_VAR_ALTERNATION = "|".join(re.escape(k.value) for k in RECOGNISED_KINDS)

MACRO_PATTERN = re.compile(
    r"\$\{"
    rf"(?P<var>{_VAR_ALTERNATION})"
    r"(?P<offset>[+\-]\d+)?"
    r"(?:(?P<month>[+\-]\d+)m)?"
    r"(?:(?P<day>[+\-]\d+)d)?"
    r"(?:(?P<hour>[+\-]\d+)h)?"
    r"(?:(?P<second>[+\-]\d+)s)?"
    r"\}",
    re.ASCII,
)

# offsets are signed 64-bit integers, anything wider is rejected
_OFFSET_MIN = -(2 ** 63)
_OFFSET_MAX = 2 ** 63 - 1


class TimeMacroError(Exception):
    """Base class for timemacro errors."""


class MacroParseError(TimeMacroError, ValueError):
    """An offset term inside a macro could not be parsed."""

    def __init__(self, group: str, value: str) -> None:
        super().__init__(f"parse {group} error: invalid offset {value!r}")
        self.group = group
        self.value = value


@dataclass(frozen=True)
class ParsedMacro:
    kind: MacroKind
    raw: str
    offset: Optional[int] = None
    offset_month: Optional[int] = None
    offset_day: Optional[int] = None
    offset_hour: Optional[int] = None
    offset_second: Optional[int] = None


def _parse_offset(match: re.Match[str], group: str) -> Optional[int]:
    value = match.group(group)
    if not value:
        return None
    try:
        number = int(value, 10)
    except ValueError as exc:
        raise MacroParseError(group, value) from exc
    if not _OFFSET_MIN <= number <= _OFFSET_MAX:
        raise MacroParseError(group, value)
    return number


def parse_macro(match: re.Match[str]) -> ParsedMacro:
    """
    Build a ParsedMacro from a MACRO_PATTERN match.

    Raises MacroParseError if any offset term is out of range.
    """
    return ParsedMacro(
        kind=MacroKind(match.group("var")),
        raw=match.group(0),
        offset=_parse_offset(match, "offset"),
        offset_month=_parse_offset(match, "month"),
        offset_day=_parse_offset(match, "day"),
        offset_hour=_parse_offset(match, "hour"),
        offset_second=_parse_offset(match, "second"),
    )


def find_macros(text: str) -> list[ParsedMacro]:
    """Return every well-formed macro in *text*, in order of appearance."""
    found: list[ParsedMacro] = []
    for match in MACRO_PATTERN.finditer(text or ""):
        try:
            found.append(parse_macro(match))
        except MacroParseError:
            continue
    return found
