"""
Weekday Providers

Treat every occurrence of a weekday as a holiday, e.g. "every Sunday is a
no-work day". The helper merges these with a region's holidays when
computing no-work days.
"""
from __future__ import annotations

from dataclasses import dataclass

from .. import dates
from ..models import (
    NO_FLAGS,
    Holiday,
    HolidayList,
    HolidayType,
    Weekday,
)


WEEKDAY_REGION_PREFIX = "weekday:"


@dataclass(frozen=True)
class WeekdayProvider:
    """
    One entry per matching weekday across the whole year (52 or 53 entries).

    Entries are typed ``OTHER | additional_type``.
    """
    weekday: Weekday
    additional_type: HolidayType = NO_FLAGS

    def __post_init__(self) -> None:
        object.__setattr__(self, "weekday", Weekday(self.weekday))

    @property
    def region_id(self) -> str:
        return WEEKDAY_REGION_PREFIX + self.weekday.holiday_name

    @property
    def name(self) -> str:
        return f"Every {self.weekday.holiday_name.capitalize()}"

    def calculate_holidays_for_year(self, year: int) -> HolidayList:
        holiday_type = HolidayType.OTHER | self.additional_type
        return HolidayList(
            Holiday(self.weekday.holiday_name, d, holiday_type)
            for d in dates.days_of_year(year)
            if dates.day_of_week(d) == self.weekday
        )


def sundays(additional_type: HolidayType = HolidayType.DAY_OFF) -> WeekdayProvider:
    """Every Sunday, a day off by default."""
    return WeekdayProvider(Weekday.SUNDAY, additional_type)


def saturdays(additional_type: HolidayType = HolidayType.DAY_OFF) -> WeekdayProvider:
    """Every Saturday, a day off by default."""
    return WeekdayProvider(Weekday.SATURDAY, additional_type)


def all_weekday_providers() -> list[WeekdayProvider]:
    """Day-off providers for each weekday, Sunday first."""
    return [WeekdayProvider(weekday, HolidayType.DAY_OFF) for weekday in Weekday]
