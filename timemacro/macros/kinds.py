"""
Macro variable kinds.

Each kind decides two things: the unit of its bare (primary) offset and
the output format of the shifted anchor.

  ${DATE}          →  2015-05-17
  ${date}          →  20150526
  ${HOUR}          →  2
  ${hour}          →  02
  ${day}           →  15
  ${month}         →  03
  ${timestamp}     →  1426406400
  ${week_of_year}  →  00..06 (weekday, Sunday = 00)
"""

from __future__ import annotations

from enum import Enum


class MacroKind(str, Enum):
    DATE = "DATE"
    date = "date"
    HOUR = "HOUR"
    hour = "hour"
    day = "day"
    month = "month"
    timestamp = "timestamp"
    week_of_year = "week_of_year"


# Names accepted inside ${...}.  HOUR has a formatter but was never part of
# the recognised set, so ${HOUR} passes through untouched.
RECOGNISED_KINDS: tuple[MacroKind, ...] = (
    MacroKind.DATE,
    MacroKind.date,
    MacroKind.hour,
    MacroKind.day,
    MacroKind.month,
    MacroKind.timestamp,
    MacroKind.week_of_year,
)
