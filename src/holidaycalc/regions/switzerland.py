"""
Switzerland Holiday Rules

Federal holidays plus a selection of cantons. Most holidays are set by the
cantons, so the federal list is short:
- New Year's Day, Ascension, Swiss National Day, Christmas Day
- Federal Day of Thanksgiving, anchored on the first Sunday of September

Cantonal holidays that only apply in some municipalities carry PARTIAL_ONLY.
"""
from __future__ import annotations

from datetime import timedelta

from .. import dates
from ..models import (
    OFFICIAL_DAY_OFF,
    OFFICIAL_PARTIAL_DAY_OFF,
    PARTIAL_DAY_OFF,
    Holiday,
    HolidayListBuilder,
    HolidayName,
    HolidayType,
    Weekday,
)
from ..providers import RegionProvider
from ..rules import christian, common


def federal_day_of_thanksgiving(year: int, additional_type: HolidayType = OFFICIAL_DAY_OFF) -> Holiday:
    return Holiday(
        HolidayName.FEDERAL_DAY_OF_THANKSGIVING,
        dates.nth_weekday_of_month(year, 9, Weekday.SUNDAY, 1),
        HolidayType.RELIGIOUS | additional_type,
    )


def berchtoldstag(year: int, additional_type: HolidayType = OFFICIAL_DAY_OFF) -> Holiday:
    return common.fixed(HolidayName.BERCHTOLDSTAG, year, 1, 2, HolidayType.OTHER, additional_type)


def _switzerland(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(common.new_year(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.ascension(year, OFFICIAL_DAY_OFF))
    holidays.add(common.fixed(HolidayName.SWISS_NATIONAL_DAY, year, 8, 1, HolidayType.OTHER, OFFICIAL_DAY_OFF))
    holidays.add(federal_day_of_thanksgiving(year))
    holidays.add(christian.christmas_day(year, OFFICIAL_DAY_OFF))


# =============================================================================
# Cantons
# =============================================================================

def _aargau(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(berchtoldstag(year, OFFICIAL_PARTIAL_DAY_OFF))
    holidays.add(christian.good_friday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.easter_monday(year, OFFICIAL_PARTIAL_DAY_OFF))
    # Labor Day is a full day off only when it falls on a Monday
    labor_day = common.labor_day(year, HolidayType.PARTIAL_ONLY)
    if dates.day_of_week(labor_day.date) == Weekday.MONDAY:
        holidays.add(labor_day.with_type(HolidayType.DAY_OFF))
    else:
        holidays.add(labor_day.with_type(HolidayType.HALF_DAY_OFF))
    holidays.add(christian.whit_monday(year, OFFICIAL_PARTIAL_DAY_OFF))
    holidays.add(christian.corpus_christi(year, OFFICIAL_PARTIAL_DAY_OFF))
    holidays.add(christian.assumption_day(year, OFFICIAL_PARTIAL_DAY_OFF))
    holidays.add(christian.all_saints_day(year, OFFICIAL_PARTIAL_DAY_OFF))
    holidays.add(christian.immaculate_conception(year, OFFICIAL_PARTIAL_DAY_OFF))
    holidays.add(christian.second_christmas_day(year, OFFICIAL_PARTIAL_DAY_OFF))


def _basel_landschaft(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(berchtoldstag(year, PARTIAL_DAY_OFF))
    holidays.add(christian.good_friday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.easter_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(common.labor_day(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.whit_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.corpus_christi(year, PARTIAL_DAY_OFF))
    holidays.add(christian.assumption_day(year, PARTIAL_DAY_OFF))
    holidays.add(christian.second_christmas_day(year, OFFICIAL_DAY_OFF))


def _basel_stadt(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.good_friday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.easter_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(common.labor_day(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.whit_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.second_christmas_day(year, OFFICIAL_DAY_OFF))


def _bern(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(berchtoldstag(year))
    holidays.add(christian.good_friday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.easter_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.whit_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.second_christmas_day(year, OFFICIAL_DAY_OFF))


def _zurich(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(berchtoldstag(year))
    holidays.add(christian.good_friday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.easter_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(common.labor_day(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.whit_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.second_christmas_day(year, OFFICIAL_DAY_OFF))


def _geneva(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.good_friday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.easter_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.whit_monday(year, OFFICIAL_DAY_OFF))
    # Thursday after the first Sunday of September
    holidays.add(Holiday(
        HolidayName.GENFER_BETTAG,
        federal_day_of_thanksgiving(year).date + timedelta(days=4),
        HolidayType.RELIGIOUS | OFFICIAL_DAY_OFF,
    ))
    holidays.add(common.fixed(
        HolidayName.GENEVA_RESTORATION_OF_THE_REPUBLIC, year, 12, 31, HolidayType.OTHER, OFFICIAL_DAY_OFF,
    ))


SWITZERLAND = RegionProvider("CH", "Switzerland", _switzerland)

AARGAU = SWITZERLAND.child("CH-AG", "Aargau", _aargau)
BASEL_LANDSCHAFT = SWITZERLAND.child("CH-BL", "Basel-Landschaft", _basel_landschaft)
BASEL_STADT = SWITZERLAND.child("CH-BS", "Basel-Stadt", _basel_stadt)
BERN = SWITZERLAND.child("CH-BE", "Bern", _bern)
ZURICH = SWITZERLAND.child("CH-ZH", "Zurich", _zurich)
GENEVA = SWITZERLAND.child("CH-GE", "Geneva", _geneva)

REGIONS = [
    SWITZERLAND,
    AARGAU,
    BASEL_LANDSCHAFT,
    BASEL_STADT,
    BERN,
    ZURICH,
    GENEVA,
]
