"""
Built-in formatters
-------------------
${DATE}          →  YYYY-MM-DD
${date}          →  YYYYMMDD
${HOUR}          →  hour of day, no padding
${hour}          →  hour of day, two digits
${day}           →  day of month, no padding
${month}         →  month, two digits
${timestamp}     →  Unix seconds
${week_of_year}  →  weekday number, two digits (Sunday = 00)

week_of_year has always produced the weekday rather than the week number.
Set week_of_year_mode="iso_week" to get the ISO-8601 week instead.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from ..core.config import Settings
from .kinds import MacroKind
from .registry import FormatterRegistry


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def unix_seconds(dt: datetime) -> int:
    # utctimetuple() overflows within a day of the datetime limits
    if dt.tzinfo is None:
        return (dt - _EPOCH.replace(tzinfo=None)) // timedelta(seconds=1)
    return (dt - _EPOCH) // timedelta(seconds=1)


def register(registry: FormatterRegistry) -> None:

    @registry.register(MacroKind.DATE)
    def date_hyphen(dt: datetime, settings: Settings) -> str:
        return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"

    @registry.register(MacroKind.date)
    def date_compact(dt: datetime, settings: Settings) -> str:
        return f"{dt.year:04d}{dt.month:02d}{dt.day:02d}"

    @registry.register(MacroKind.HOUR)
    def hour_plain(dt: datetime, settings: Settings) -> str:
        return str(dt.hour)

    @registry.register(MacroKind.hour)
    def hour_padded(dt: datetime, settings: Settings) -> str:
        return f"{dt.hour:02d}"

    @registry.register(MacroKind.day)
    def day_plain(dt: datetime, settings: Settings) -> str:
        return str(dt.day)

    @registry.register(MacroKind.month)
    def month_padded(dt: datetime, settings: Settings) -> str:
        return f"{dt.month:02d}"

    @registry.register(MacroKind.timestamp)
    def timestamp(dt: datetime, settings: Settings) -> str:
        return str(unix_seconds(dt))

    @registry.register(MacroKind.week_of_year)
    def week_of_year(dt: datetime, settings: Settings) -> str:
        if settings.week_of_year_mode == "iso_week":
            return f"{dt.isocalendar().week:02d}"
        return f"{dt.isoweekday() % 7:02d}"
