"""
holidaycalc Providers

Holiday providers turn rules into a concrete HolidayList for a year.

Provides:
- HolidayProvider protocol for custom implementations
- RegionProvider composing a region on top of its parent region
- WeekdayProvider generating every occurrence of a weekday
- Compensatory-day rule for holidays falling on a weekend
"""
from __future__ import annotations

from .base import (
    HolidayProvider,
    RegionProvider,
    RuleFunction,
    no_rules,
)
from .compensatory import (
    add_compensatory_day,
    add_compensatory_new_year_for_following_year,
    compensatory_day,
)
from .weekday import (
    WEEKDAY_REGION_PREFIX,
    WeekdayProvider,
    all_weekday_providers,
    saturdays,
    sundays,
)

__all__ = [
    # Protocols and base classes
    "HolidayProvider",
    "RegionProvider",
    "RuleFunction",
    "no_rules",
    # Compensatory days
    "compensatory_day",
    "add_compensatory_day",
    "add_compensatory_new_year_for_following_year",
    # Weekdays
    "WEEKDAY_REGION_PREFIX",
    "WeekdayProvider",
    "all_weekday_providers",
    "saturdays",
    "sundays",
]
