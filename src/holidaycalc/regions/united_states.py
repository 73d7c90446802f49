"""
US Federal Holiday Rules

Federal holidays:
- New Year's Day (January 1)
- Martin Luther King Jr. Day (3rd Monday in January) - Since 1986
- Washington's Birthday (3rd Monday in February)
- Memorial Day (Last Monday in May)
- Juneteenth (June 19) - Since 2021
- Independence Day (July 4)
- Labor Day (1st Monday in September)
- Columbus Day (2nd Monday in October)
- Veterans Day (November 11)
- Thanksgiving Day (4th Thursday in November)
- Christmas Day (December 25)

Observed holidays: when a fixed-date holiday falls on Saturday, it's observed
on Friday; on Sunday, it's observed on Monday. A New Year's Day on a Saturday
is observed on December 31 of the previous year.
"""
from __future__ import annotations

from datetime import date

from .. import dates
from ..models import OFFICIAL_DAY_OFF, Holiday, HolidayListBuilder, HolidayName, HolidayType, Weekday
from ..providers import (
    RegionProvider,
    add_compensatory_day,
    add_compensatory_new_year_for_following_year,
)
from ..rules import christian, common

MLK_DAY_START_YEAR = 1986
JUNETEENTH_START_YEAR = 2021


def _federal(name: str, d: date) -> Holiday:
    return Holiday(name, d, HolidayType.OTHER | OFFICIAL_DAY_OFF)


def _united_states(year: int, holidays: HolidayListBuilder) -> None:
    fixed_holidays = [
        common.new_year(year, OFFICIAL_DAY_OFF),
        _federal(HolidayName.INDEPENDENCE_DAY, date(year, 7, 4)),
        _federal(HolidayName.VETERANS_DAY, date(year, 11, 11)),
        christian.christmas_day(year, OFFICIAL_DAY_OFF),
    ]
    if year >= JUNETEENTH_START_YEAR:
        fixed_holidays.append(_federal(HolidayName.JUNETEENTH, date(year, 6, 19)))

    for holiday in fixed_holidays:
        holidays.add(holiday)
        add_compensatory_day(holidays, holiday, year)
    add_compensatory_new_year_for_following_year(holidays, year, OFFICIAL_DAY_OFF)

    if year >= MLK_DAY_START_YEAR:
        holidays.add(_federal(
            HolidayName.MARTIN_LUTHER_KING_JR_DAY, dates.nth_weekday_of_month(year, 1, Weekday.MONDAY, 3),
        ))
    holidays.add(_federal(
        HolidayName.WASHINGTONS_BIRTHDAY, dates.nth_weekday_of_month(year, 2, Weekday.MONDAY, 3),
    ))
    holidays.add(_federal(
        HolidayName.MEMORIAL_DAY, dates.nth_weekday_of_month(year, 5, Weekday.MONDAY, -1),
    ))
    holidays.add(_federal(
        HolidayName.US_LABOR_DAY, dates.nth_weekday_of_month(year, 9, Weekday.MONDAY, 1),
    ))
    holidays.add(_federal(
        HolidayName.COLUMBUS_DAY, dates.nth_weekday_of_month(year, 10, Weekday.MONDAY, 2),
    ))
    holidays.add(_federal(
        HolidayName.THANKSGIVING_DAY, dates.nth_weekday_of_month(year, 11, Weekday.THURSDAY, 4),
    ))


UNITED_STATES = RegionProvider("US", "United States", _united_states)

REGIONS = [
    UNITED_STATES,
]
