"""
Christian holiday rules shared across regions.

Moveable feasts are expressed as offsets from Easter Sunday; the rest are
fixed dates or weekday-relative. All rules carry the RELIGIOUS flag.
"""
from __future__ import annotations

from datetime import date

from .. import dates
from ..models import NO_FLAGS, Holiday, HolidayName, HolidayType, Weekday


# Offsets from Easter Sunday in days
ASH_WEDNESDAY_OFFSET = -46
MAUNDY_THURSDAY_OFFSET = -3
GOOD_FRIDAY_OFFSET = -2
EASTER_MONDAY_OFFSET = 1
ASCENSION_OFFSET = 39
WHIT_SUNDAY_OFFSET = 49
WHIT_MONDAY_OFFSET = 50
CORPUS_CHRISTI_OFFSET = 60


def easter_relative(name: str, year: int, offset: int,
                    additional_type: HolidayType = NO_FLAGS) -> Holiday:
    """Easter-relative rule: signed day offset from Easter Sunday."""
    return Holiday(name, dates.easter_offset(year, offset), HolidayType.RELIGIOUS | additional_type)


def religious_fixed(name: str, year: int, month: int, day: int,
                    additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return Holiday(name, date(year, month, day), HolidayType.RELIGIOUS | additional_type)


# =============================================================================
# Moveable feasts
# =============================================================================

def ash_wednesday(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return easter_relative(HolidayName.ASH_WEDNESDAY, year, ASH_WEDNESDAY_OFFSET, additional_type)


def maundy_thursday(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return easter_relative(HolidayName.MAUNDY_THURSDAY, year, MAUNDY_THURSDAY_OFFSET, additional_type)


def good_friday(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return easter_relative(HolidayName.GOOD_FRIDAY, year, GOOD_FRIDAY_OFFSET, additional_type)


def easter_sunday(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return easter_relative(HolidayName.EASTER_SUNDAY, year, 0, additional_type)


def easter_monday(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return easter_relative(HolidayName.EASTER_MONDAY, year, EASTER_MONDAY_OFFSET, additional_type)


def ascension(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return easter_relative(HolidayName.ASCENSION, year, ASCENSION_OFFSET, additional_type)


def whit_sunday(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return easter_relative(HolidayName.WHIT_SUNDAY, year, WHIT_SUNDAY_OFFSET, additional_type)


def whit_monday(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return easter_relative(HolidayName.WHIT_MONDAY, year, WHIT_MONDAY_OFFSET, additional_type)


def corpus_christi(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return easter_relative(HolidayName.CORPUS_CHRISTI, year, CORPUS_CHRISTI_OFFSET, additional_type)


# =============================================================================
# Fixed feasts
# =============================================================================

def epiphany(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return religious_fixed(HolidayName.EPIPHANY, year, 1, 6, additional_type)


def saint_josephs_day(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return religious_fixed(HolidayName.SAINT_JOSEPHS_DAY, year, 3, 19, additional_type)


def assumption_day(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return religious_fixed(HolidayName.ASSUMPTION_DAY, year, 8, 15, additional_type)


def reformation_day(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return religious_fixed(HolidayName.REFORMATION_DAY, year, 10, 31, additional_type)


def all_saints_day(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return religious_fixed(HolidayName.ALL_SAINTS_DAY, year, 11, 1, additional_type)


def immaculate_conception(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return religious_fixed(HolidayName.IMMACULATE_CONCEPTION, year, 12, 8, additional_type)


def christmas_eve(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return religious_fixed(HolidayName.CHRISTMAS_EVE, year, 12, 24, additional_type)


def christmas_day(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return religious_fixed(HolidayName.CHRISTMAS_DAY, year, 12, 25, additional_type)


def second_christmas_day(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    return religious_fixed(HolidayName.SECOND_CHRISTMAS_DAY, year, 12, 26, additional_type)


# =============================================================================
# Weekday-relative feasts
# =============================================================================

def repentance_and_prayer_day(year: int, additional_type: HolidayType = NO_FLAGS) -> Holiday:
    """Wednesday before November 23 (eleven days before the first Advent Sunday)."""
    return Holiday(
        HolidayName.REPENTANCE_AND_PRAYER_DAY,
        dates.weekday_before(date(year, 11, 23), Weekday.WEDNESDAY),
        HolidayType.RELIGIOUS | additional_type,
    )
