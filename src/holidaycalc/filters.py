"""
holidaycalc Filters

Pure transforms over holiday lists. A filter never mutates its input; it
returns a new HolidayList.

Filters compose two ways:
- Wrapping: every filter takes an optional ``inner`` filter, applied first.
  ``IncludeTimespanFilter(a, b, inner=IncludeTypeFilter(DAY_OFF))`` keeps day-off
  entries first and restricts them to the span afterwards.
- Pipelines: ``pipeline(f1, f2, f3)`` applies its filters left to right.

Usage:
    day_off = IncludeTypeFilter(HolidayType.DAY_OFF)
    in_may = IncludeTimespanFilter(date(2024, 5, 1), date(2024, 5, 31), inner=day_off)
    holidays = in_may(calculator.calculate_holidays_for_year(2024, "DE"))
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from . import dates
from .models import Holiday, HolidayList, HolidayType


def _as_list(holidays: Iterable[Holiday]) -> HolidayList:
    return holidays if isinstance(holidays, HolidayList) else HolidayList(holidays)


class HolidayFilter(ABC):
    """Base class for filters. Subclasses implement ``apply``."""

    inner: Optional[HolidayFilter]

    @abstractmethod
    def apply(self, holidays: HolidayList) -> Iterable[Holiday]:
        """This filter's own pass."""

    def filter(self, holidays: Iterable[Holiday]) -> HolidayList:
        holidays = _as_list(holidays)
        if self.inner is not None:
            holidays = self.inner.filter(holidays)
        return HolidayList(self.apply(holidays))

    def __call__(self, holidays: Iterable[Holiday]) -> HolidayList:
        return self.filter(holidays)


# =============================================================================
# Selection
# =============================================================================

@dataclass(frozen=True)
class IncludeTimespanFilter(HolidayFilter):
    """Keep entries with ``first_day <= date <= last_day``."""
    first_day: date
    last_day: date
    inner: Optional[HolidayFilter] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "first_day", dates.to_date(self.first_day))
        object.__setattr__(self, "last_day", dates.to_date(self.last_day))

    def apply(self, holidays: HolidayList) -> Iterable[Holiday]:
        return (h for h in holidays if self.first_day <= h.date <= self.last_day)


@dataclass(frozen=True)
class IncludeHolidayNameFilter(HolidayFilter):
    """Keep entries whose name equals ``name`` exactly."""
    name: str
    inner: Optional[HolidayFilter] = None

    def apply(self, holidays: HolidayList) -> Iterable[Holiday]:
        return (h for h in holidays if h.name == self.name)


@dataclass(frozen=True)
class ExcludeHolidayNameFilter(HolidayFilter):
    """Drop entries whose name equals ``name`` exactly."""
    name: str
    inner: Optional[HolidayFilter] = None

    def apply(self, holidays: HolidayList) -> Iterable[Holiday]:
        return (h for h in holidays if h.name != self.name)


@dataclass(frozen=True)
class IncludeTypeFilter(HolidayFilter):
    """Keep entries carrying ALL bits of ``type``."""
    type: HolidayType
    inner: Optional[HolidayFilter] = None

    def apply(self, holidays: HolidayList) -> Iterable[Holiday]:
        return (h for h in holidays if (h.type & self.type) == self.type)


@dataclass(frozen=True)
class ExcludeTypeFilter(HolidayFilter):
    """Drop entries carrying ANY bit of ``type``."""
    type: HolidayType
    inner: Optional[HolidayFilter] = None

    def apply(self, holidays: HolidayList) -> Iterable[Holiday]:
        return (h for h in holidays if not h.type & self.type)


@dataclass(frozen=True)
class IncludeWeekdayFilter(HolidayFilter):
    """Keep entries falling on one of ``weekdays`` (Sunday=0)."""
    weekdays: frozenset[int]
    inner: Optional[HolidayFilter] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "weekdays", frozenset(int(w) for w in self.weekdays))

    def apply(self, holidays: HolidayList) -> Iterable[Holiday]:
        return (h for h in holidays if dates.day_of_week(h.date) in self.weekdays)


@dataclass(frozen=True)
class IncludeUniqueDateFilter(HolidayFilter):
    """
    Drop entries already seen, first seen wins.

    Entries are the same when name and date match. With ``ignore_name`` the
    date alone decides, leaving at most one entry per day.
    """
    ignore_name: bool = False
    inner: Optional[HolidayFilter] = None

    def apply(self, holidays: HolidayList) -> Iterable[Holiday]:
        seen: set[tuple[str, date]] = set()
        unique = []
        for holiday in holidays:
            key = ("", holiday.date) if self.ignore_name else (holiday.name, holiday.date)
            if key not in seen:
                seen.add(key)
                unique.append(holiday)
        return unique


# =============================================================================
# Ordering
# =============================================================================

@dataclass(frozen=True)
class SortByDateFilter(HolidayFilter):
    """Stable ascending sort by date."""
    inner: Optional[HolidayFilter] = None

    def apply(self, holidays: HolidayList) -> Iterable[Holiday]:
        return sorted(holidays, key=lambda h: h.date)


# =============================================================================
# Composition
# =============================================================================

class FilterPipeline:
    """Applies filters left to right."""

    def __init__(self, *filters: HolidayFilter):
        self.filters = filters

    def filter(self, holidays: Iterable[Holiday]) -> HolidayList:
        result = _as_list(holidays)
        for holiday_filter in self.filters:
            result = holiday_filter.filter(result)
        return result

    def __call__(self, holidays: Iterable[Holiday]) -> HolidayList:
        return self.filter(holidays)

    def __repr__(self) -> str:
        return f"FilterPipeline{self.filters!r}"


def pipeline(*filters: HolidayFilter) -> FilterPipeline:
    return FilterPipeline(*filters)


def merge_holiday_lists(holiday_lists: Iterable[Iterable[Holiday]]) -> HolidayList:
    """Concatenate lists and sort by date. Duplicates are kept."""
    merged: list[Holiday] = []
    for holidays in holiday_lists:
        merged.extend(holidays)
    return SortByDateFilter().filter(merged)
