"""Statutory holiday lookups against the judicial calendar."""

from __future__ import annotations

from datetime import date

from tenanttools.backend.config.calendar_config import (
    Holiday,
    JudicialCalendar,
    load_calendar,
)

from .utils import parse_date


def list_holidays(year: int, calendar: JudicialCalendar | None = None) -> tuple[Holiday, ...]:
    """Return the holidays configured for ``year``.

    Years missing from the table yield an empty tuple; the table only covers a
    curated range of years, so callers must not assume every year is present.
    """

    if calendar is None:
        calendar = load_calendar()
    return calendar.holidays_for(year)


def holiday_on(
    day: date | str, calendar: JudicialCalendar | None = None
) -> Holiday | None:
    """Return the holiday falling on ``day`` or ``None``."""

    day = parse_date(day)
    for holiday in list_holidays(day.year, calendar):
        if holiday.date == day:
            return holiday
    return None


def available_years(calendar: JudicialCalendar | None = None) -> tuple[int, ...]:
    if calendar is None:
        calendar = load_calendar()
    return calendar.supported_years


__all__ = ["available_years", "holiday_on", "list_holidays"]
