"""
holidaycalc - Holiday Calculation Engine

holidaycalc computes public and observance holidays for a region and year,
and filters, merges and formats the results.

Key Features:
- Gregorian computus for every moveable feast
- Regions composed by delegation (country -> state -> sub-division)
- Compensatory days for holidays falling on a weekend
- Typed holidays (official, day off, half day, school closure, partial, ...)
- Declarative YAML/JSON rule packs for additional regions
- iCalendar output with translated holiday names

Quick Start:
    from datetime import date
    from holidaycalc import HolidayCalculator, HolidayHelper, HolidayType
    from holidaycalc.filters import IncludeTypeFilter

    calculator = HolidayCalculator()
    holidays = calculator.calculate_holidays_for_year(2024, "DE-BY")
    days_off = IncludeTypeFilter(HolidayType.DAY_OFF)(holidays)

    helper = HolidayHelper(calculator)
    helper.is_day_a_holiday(date(2024, 10, 3), "DE")
    helper.count_work_days(date(2024, 12, 1), date(2024, 12, 31), "DE-BY")

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    NO_FLAGS,
    OFFICIAL_DAY_OFF,
    OFFICIAL_PARTIAL_DAY_OFF,
    PARTIAL_DAY_OFF,
    Holiday,
    HolidayList,
    HolidayListBuilder,
    HolidayName,
    HolidayType,
    Weekday,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    HolidayCalcError,
    InvalidDateRangeError,
    InvalidYearError,
    RegionNotFoundError,
    RulePackLoadError,
    RulePackValidationError,
    RulePackVersionMismatch,
)

# =============================================================================
# Engine
# =============================================================================
from .calculator import HolidayCalculator
from .config import Settings
from .helper import HolidayHelper
from .providers import HolidayProvider, RegionProvider, WeekdayProvider
from .registry import RegionRegistry, default_registry

__all__ = [
    "__version__",
    # Models
    "Holiday",
    "HolidayList",
    "HolidayListBuilder",
    "HolidayName",
    "HolidayType",
    "Weekday",
    "NO_FLAGS",
    "OFFICIAL_DAY_OFF",
    "PARTIAL_DAY_OFF",
    "OFFICIAL_PARTIAL_DAY_OFF",
    # Exceptions
    "HolidayCalcError",
    "RegionNotFoundError",
    "InvalidYearError",
    "InvalidDateRangeError",
    "RulePackLoadError",
    "RulePackValidationError",
    "RulePackVersionMismatch",
    # Engine
    "HolidayCalculator",
    "HolidayHelper",
    "HolidayProvider",
    "RegionProvider",
    "WeekdayProvider",
    "RegionRegistry",
    "default_registry",
    "Settings",
]
