"""
holidaycalc Models

Value types shared by providers, filters and formatters.
"""
from __future__ import annotations

from .enums import (
    NO_FLAGS,
    OFFICIAL_DAY_OFF,
    OFFICIAL_PARTIAL_DAY_OFF,
    PARTIAL_DAY_OFF,
    HolidayType,
    Weekday,
)
from .holiday import (
    SIMPLE_DATE_FORMAT,
    Holiday,
    HolidayList,
    HolidayListBuilder,
)
from .names import HolidayName

__all__ = [
    # Enums
    "HolidayType",
    "NO_FLAGS",
    "Weekday",
    "OFFICIAL_DAY_OFF",
    "PARTIAL_DAY_OFF",
    "OFFICIAL_PARTIAL_DAY_OFF",
    # Holiday
    "Holiday",
    "HolidayList",
    "HolidayListBuilder",
    "HolidayName",
    "SIMPLE_DATE_FORMAT",
]
