"""
holidaycalc Date Math

Gregorian computus and calendar arithmetic for the rule engine.

All functions work on calendar dates. Weekdays use Sunday=0 ... Saturday=6.
"""
from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Union

from .exceptions import InvalidYearError


# Gregorian calendar adoption; the computus below is undefined before it
MIN_YEAR = 1583
MAX_YEAR = 9999


def validate_year(year: int) -> int:
    """
    Check that a year is inside the supported range.

    Raises:
        InvalidYearError: If the year is outside [MIN_YEAR, MAX_YEAR]
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYearError(
            message=f"Year {year} is outside the supported range {MIN_YEAR}-{MAX_YEAR}",
            details={"year": year, "min_year": MIN_YEAR, "max_year": MAX_YEAR},
        )
    return year


def easter_sunday(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian algorithm.

    This is the standard algorithm for calculating Easter in Western
    Christianity. The result always falls between March 22 and April 25.

    Raises:
        InvalidYearError: If the year is outside the Gregorian range
    """
    validate_year(year)
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def easter_offset(year: int, offset: int) -> date:
    """Date ``offset`` days from Easter Sunday (negative = before)."""
    return easter_sunday(year) + timedelta(days=offset)


def to_date(value: Union[date, datetime]) -> date:
    """Truncate a datetime (zoned or naive) to its calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def day_of_week(d: date) -> int:
    """Day of week with Sunday=0 and Saturday=6."""
    return d.isoweekday() % 7


def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)


def last_day_of_month(year: int, month: int) -> int:
    """Number of the last day in a month (28-31)."""
    return calendar.monthrange(year, month)[1]


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> Optional[date]:
    """
    Get the nth occurrence of a weekday in a month.

    Args:
        year: Year
        month: Month (1-12)
        weekday: Day of week (0=Sunday, 6=Saturday)
        n: Which occurrence (1=first, 2=second, ..., -1=last)

    Returns:
        The date of the nth weekday, or None if the month has fewer occurrences
    """
    last = last_day_of_month(year, month)
    if n < 0:
        days_since_weekday = (day_of_week(date(year, month, last)) - weekday) % 7
        day = last - days_since_weekday - 7 * (-n - 1)
    else:
        days_until_weekday = (weekday - day_of_week(date(year, month, 1))) % 7
        day = 1 + days_until_weekday + 7 * (n - 1)
    if not 1 <= day <= last:
        return None
    return date(year, month, day)


def weekday_before(d: date, weekday: int) -> date:
    """Latest ``weekday`` strictly before ``d``."""
    days_back = (day_of_week(d) - weekday) % 7 or 7
    return d - timedelta(days=days_back)


def days_of_year(year: int) -> Iterator[date]:
    """Iterate over every calendar day of a year."""
    first_day = date(year, 1, 1)
    for offset in range(366 if calendar.isleap(year) else 365):
        yield first_day + timedelta(days=offset)
