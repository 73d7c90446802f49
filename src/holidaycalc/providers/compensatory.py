"""
Compensatory Day Rule

When a holiday falls on a weekend, a substitute day off is granted on the
nearest weekday:
- Saturday holidays are compensated on the preceding Friday
- Sunday holidays are compensated on the following Monday

The compensatory entry carries the "_compensatory" name suffix and the
COMPENSATORY flag in addition to the original flags.

Two year-boundary cases are handled separately and must stay separate:
- New Year on a Saturday would be compensated on December 31 of the previous
  year; ``compensatory_day`` skips it for the year being calculated.
- That December 31 is instead added by the previous year's calculation via
  ``add_compensatory_new_year_for_following_year``.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from .. import dates
from ..models import (
    NO_FLAGS,
    Holiday,
    HolidayListBuilder,
    HolidayName,
    HolidayType,
    Weekday,
)


def compensatory_day(holiday: Holiday, year: int) -> Optional[Holiday]:
    """
    Calculate the compensatory entry for a holiday.

    Args:
        holiday: The actual holiday
        year: The year being calculated

    Returns:
        The compensatory holiday, or None when no substitute day applies
    """
    weekday = dates.day_of_week(holiday.date)
    if weekday == Weekday.SATURDAY:
        if holiday.date == date(year, 1, 1):
            # December 31 belongs to the previous year's list
            return None
        return holiday.compensatory(holiday.date - timedelta(days=1))
    if weekday == Weekday.SUNDAY:
        if holiday.date == date(year, 12, 31):
            # The Monday belongs to the following year's list
            return None
        return holiday.compensatory(holiday.date + timedelta(days=1))
    return None


def add_compensatory_day(holidays: HolidayListBuilder, holiday: Holiday, year: int) -> None:
    """Add the compensatory entry for ``holiday`` if it falls on a weekend."""
    compensatory = compensatory_day(holiday, year)
    if compensatory is not None:
        holidays.add(compensatory)


def add_compensatory_new_year_for_following_year(
    holidays: HolidayListBuilder,
    year: int,
    additional_type: HolidayType = NO_FLAGS,
) -> None:
    """
    Add December 31 of ``year`` when New Year of ``year + 1`` is a Saturday.

    December 31 being a Friday means the following January 1 is a Saturday;
    the day off is granted in ``year``.
    """
    new_years_eve = date(year, 12, 31)
    if dates.day_of_week(new_years_eve) == Weekday.FRIDAY:
        holidays.add(Holiday(
            HolidayName.NEW_YEAR_COMPENSATORY,
            new_years_eve,
            HolidayType.COMPENSATORY | additional_type,
        ))
