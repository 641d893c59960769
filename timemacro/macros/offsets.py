"""
Offset arithmetic
-----------------
Calendar terms (months, days) move the wall-clock fields and normalise any
overflow forward, so 2023-01-31 plus one month is 2023-03-03.  A wall time
that lands in a DST gap is pushed forward onto the real clock.  Duration
terms (hours, seconds) are absolute and are applied in UTC for aware
datetimes.

Every step works on the already-shifted value:

  2023-02-28  ${date-3+1m+2d}  →  02-25  →  03-25  →  03-27
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from .kinds import MacroKind
from .parser import ParsedMacro


def _normalise(dt: datetime) -> datetime:
    """Move a wall time that falls in a DST gap onto the real clock."""
    if dt.tzinfo is None:
        return dt
    try:
        return dt.astimezone(timezone.utc).astimezone(dt.tzinfo)
    except OverflowError:
        # UTC equivalent is past the datetime limits, keep the wall time
        return dt


def add_months(dt: datetime, months: int) -> datetime:
    """Shift *dt* by calendar months, rolling an out-of-range day forward."""
    total = dt.year * 12 + (dt.month - 1) + months
    year, month0 = divmod(total, 12)
    try:
        first = dt.replace(year=year, month=month0 + 1, day=1)
    except ValueError as exc:
        raise OverflowError(f"year {year} is out of range") from exc
    return _normalise(first + timedelta(days=dt.day - 1))


def add_days(dt: datetime, days: int) -> datetime:
    """Shift *dt* by calendar days, keeping the wall-clock time."""
    return _normalise(dt + timedelta(days=days))


def add_duration(dt: datetime, delta: timedelta) -> datetime:
    if dt.tzinfo is None:
        return dt + delta
    return (dt.astimezone(timezone.utc) + delta).astimezone(dt.tzinfo)


def _apply_primary(macro: ParsedMacro, dt: datetime) -> datetime:
    n = macro.offset
    if macro.kind in (MacroKind.date, MacroKind.DATE, MacroKind.day):
        return add_days(dt, n)
    if macro.kind in (MacroKind.HOUR, MacroKind.hour):
        return add_duration(dt, timedelta(hours=n))
    if macro.kind is MacroKind.month:
        return add_months(dt, n)
    if macro.kind is MacroKind.timestamp:
        return add_duration(dt, timedelta(seconds=n))
    # week_of_year: primary offset has no unit
    return dt


def apply_offsets(macro: ParsedMacro, anchor: datetime) -> datetime:
    """
    Return *anchor* shifted by every offset in *macro*.

    Order: primary offset, months, days, hours, seconds.  Raises
    OverflowError when a step leaves the datetime range.
    """
    dt = anchor
    if macro.offset is not None:
        dt = _apply_primary(macro, dt)
    if macro.offset_month is not None:
        dt = add_months(dt, macro.offset_month)
    if macro.offset_day is not None:
        dt = add_days(dt, macro.offset_day)
    if macro.offset_hour is not None:
        dt = add_duration(dt, timedelta(hours=macro.offset_hour))
    if macro.offset_second is not None:
        dt = add_duration(dt, timedelta(seconds=macro.offset_second))
    return dt
