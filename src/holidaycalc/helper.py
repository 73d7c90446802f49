"""
holidaycalc Helper

Answers common questions on top of the calculator and filters:
- Is a given day a holiday?
- Which holidays fall into a month, or carry a given name?
- Which days in a span are no-work days, and how many work days remain?

Usage:
    helper = HolidayHelper()
    helper.is_day_a_holiday(date(2024, 10, 3), "DE")
    helper.get_no_work_days_for_timespan(date(2024, 12, 20), date(2025, 1, 10), "DE-BY")
"""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Optional, Sequence, Union

from . import dates
from .calculator import HolidayCalculator
from .exceptions import InvalidDateRangeError
from .filters import (
    IncludeHolidayNameFilter,
    IncludeTimespanFilter,
    IncludeTypeFilter,
    IncludeUniqueDateFilter,
    merge_holiday_lists,
)
from .formatters import ICalendarFormatter, Translator
from .models import Holiday, HolidayList, HolidayType
from .providers import HolidayProvider, sundays

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


class HolidayHelper:
    """Facade over HolidayCalculator and the filters."""

    def __init__(self, calculator: Optional[HolidayCalculator] = None):
        self.calculator = calculator if calculator is not None else HolidayCalculator()

    def is_day_a_holiday(self, day: DateLike, region_id: str) -> bool:
        """True if ``region_id`` has any holiday on ``day``."""
        day = dates.to_date(day)
        holidays = self.calculator.calculate_holidays_for_year(day.year, region_id)
        return len(IncludeTimespanFilter(day, day)(holidays)) > 0

    def get_holidays_for_month(self, year: int, month: int, region_id: str) -> HolidayList:
        holidays = self.calculator.calculate_holidays_for_year(year, region_id)
        first_day = date(year, month, 1)
        last_day = date(year, month, dates.last_day_of_month(year, month))
        return IncludeTimespanFilter(first_day, last_day)(holidays)

    def get_holidays_by_name(self, year: int, name: str, region_id: str) -> HolidayList:
        holidays = self.calculator.calculate_holidays_for_year(year, region_id)
        return IncludeHolidayNameFilter(name)(holidays)

    def get_no_work_days_for_timespan(
        self,
        first_day: DateLike,
        last_day: DateLike,
        region_id: str,
        weekday_providers: Optional[Sequence[HolidayProvider]] = None,
    ) -> HolidayList:
        """
        Day-off holidays and no-work weekdays within a span, one entry per date.

        Spans crossing a year boundary are calculated year by year and merged.

        Args:
            first_day: First day of the span (inclusive)
            last_day: Last day of the span (inclusive)
            region_id: Region to calculate
            weekday_providers: No-work weekday providers; every Sunday when omitted

        Returns:
            Sorted list of DAY_OFF entries, deduplicated by date

        Raises:
            InvalidDateRangeError: If ``first_day`` is after ``last_day``
        """
        first_day = dates.to_date(first_day)
        last_day = dates.to_date(last_day)
        if first_day > last_day:
            raise InvalidDateRangeError(
                message=f"First day {first_day} is after last day {last_day}",
                details={"first_day": first_day.isoformat(), "last_day": last_day.isoformat()},
                region_id=region_id,
            )
        if not weekday_providers:
            weekday_providers = [sundays()]

        per_year = []
        for year in range(first_day.year, last_day.year + 1):
            span_start = max(first_day, date(year, 1, 1))
            span_end = min(last_day, date(year, 12, 31))
            per_year.append(
                self._no_work_days_within_year(span_start, span_end, region_id, year, weekday_providers)
            )
        return merge_holiday_lists(per_year)

    def _no_work_days_within_year(
        self,
        first_day: date,
        last_day: date,
        region_id: str,
        year: int,
        weekday_providers: Sequence[HolidayProvider],
    ) -> HolidayList:
        holidays = [self.calculator.calculate_holidays_for_year(year, region_id)]
        holidays.extend(p.calculate_holidays_for_year(year) for p in weekday_providers)
        no_work_days = IncludeTimespanFilter(
            first_day,
            last_day,
            inner=IncludeUniqueDateFilter(
                ignore_name=True,
                inner=IncludeTypeFilter(HolidayType.DAY_OFF),
            ),
        )
        return no_work_days(merge_holiday_lists(holidays))

    def count_work_days(
        self,
        first_day: DateLike,
        last_day: DateLike,
        region_id: str,
        weekday_providers: Optional[Sequence[HolidayProvider]] = None,
    ) -> int:
        """
        Days in the inclusive span that are not no-work days.

        Raises:
            InvalidDateRangeError: If ``first_day`` is after ``last_day``
        """
        no_work_days = self.get_no_work_days_for_timespan(
            first_day, last_day, region_id, weekday_providers
        )
        total_days = (dates.to_date(last_day) - dates.to_date(first_day)).days + 1
        return total_days - len(no_work_days)

    def merge_holiday_lists(self, holiday_lists: Iterable[Iterable[Holiday]]) -> HolidayList:
        """Concatenate and sort by date. Duplicates are kept."""
        return merge_holiday_lists(holiday_lists)

    def get_holiday_list_in_icalendar_format(
        self,
        holidays: Iterable[Holiday],
        translator: Optional[Translator] = None,
    ) -> str:
        """Render holidays as an iCalendar document."""
        return ICalendarFormatter(translator).render(holidays)
