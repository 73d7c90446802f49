"""
holidaycalc Enumerations

Holiday type flags and the weekday numbering used throughout the package.

Weekdays are numbered with Sunday=0 ... Saturday=6. This differs from
``date.weekday()`` (Monday=0); convert with ``dates.day_of_week()``.
"""
from __future__ import annotations

from enum import IntEnum, IntFlag


# =============================================================================
# Holiday Type Flags
# =============================================================================

class HolidayType(IntFlag):
    """
    Independent facets of a holiday, combined with bitwise OR.

    RELIGIOUS and OTHER form the classification axis (religious vs. common);
    the remaining flags describe legal status and who gets the day off.
    """
    OTHER = 1              # Common / secular classification
    RELIGIOUS = 2          # Religious classification
    OFFICIAL = 4           # Officially recognized (statutory)
    DAY_OFF = 8            # Full day off work
    HALF_DAY_OFF = 16      # Half day off work
    NO_SCHOOL = 32         # Schools closed
    PARTIAL_ONLY = 64      # Only in parts of the region
    COMPENSATORY = 128     # Substitute for a holiday on a weekend

    def has(self, flags: "HolidayType") -> bool:
        """Return True if all bits of ``flags`` are set."""
        return (self & flags) == flags

    def flag_names(self) -> list[str]:
        """Lowercase names of the set bits, lowest bit first."""
        return [flag.name.lower() for flag in HolidayType if flag & self]


# Named combinations used by the rule catalog
NO_FLAGS = HolidayType(0)
OFFICIAL_DAY_OFF = HolidayType.OFFICIAL | HolidayType.DAY_OFF
PARTIAL_DAY_OFF = HolidayType.DAY_OFF | HolidayType.PARTIAL_ONLY
OFFICIAL_PARTIAL_DAY_OFF = OFFICIAL_DAY_OFF | HolidayType.PARTIAL_ONLY


# =============================================================================
# Weekdays
# =============================================================================

class Weekday(IntEnum):
    """Day of week, Sunday=0."""
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def holiday_name(self) -> str:
        """Machine name used for entries generated by weekday providers."""
        return self.name.lower()
