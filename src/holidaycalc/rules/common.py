"""
Common (non-religious) holiday rules shared across regions.

Every rule is a pure function of the year. ``additional_type`` lets the
calling region re-flag the base semantics (e.g. DAY_OFF in one region,
PARTIAL_ONLY in another).
"""
from __future__ import annotations

from datetime import date

from ..models import NO_FLAGS, Holiday, HolidayName, HolidayType


def fixed(name: str, year: int, month: int, day: int, base_type: HolidayType,
          additional_type: HolidayType = NO_FLAGS) -> Holiday:
    """Fixed-date rule: the same month/day every year."""
    return Holiday(name, date(year, month, day), base_type | additional_type)


def new_year(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return fixed(HolidayName.NEW_YEAR, year, 1, 1, HolidayType.OTHER, additional_type)


def new_years_eve(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return fixed(HolidayName.NEW_YEARS_EVE, year, 12, 31, HolidayType.OTHER, additional_type)


def international_womens_day(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return fixed(HolidayName.INTERNATIONAL_WOMENS_DAY, year, 3, 8, HolidayType.OTHER, additional_type)


def labor_day(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return fixed(HolidayName.LABOR_DAY, year, 5, 1, HolidayType.OTHER, additional_type)


def victory_in_europe_day(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return fixed(HolidayName.VICTORY_IN_EUROPE_DAY, year, 5, 8, HolidayType.OTHER, additional_type)
