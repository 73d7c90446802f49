"""
Austria Holiday Rules

Federal holidays plus state patron saint days. State days close schools
and public offices but are not a general day off.
"""
from __future__ import annotations

from ..models import OFFICIAL_DAY_OFF, HolidayListBuilder, HolidayName, HolidayType
from ..providers import RegionProvider
from ..rules import christian, common


STATE_HOLIDAY = HolidayType.OFFICIAL | HolidayType.NO_SCHOOL


def _austria(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(common.new_year(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.epiphany(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.easter_sunday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.easter_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(common.fixed(HolidayName.AUSTRIAN_STATES_HOLIDAY, year, 5, 1, HolidayType.OTHER, OFFICIAL_DAY_OFF))
    holidays.add(christian.ascension(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.whit_sunday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.whit_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.corpus_christi(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.assumption_day(year, OFFICIAL_DAY_OFF))
    if year >= 1965:
        holidays.add(common.fixed(
            HolidayName.AUSTRIAN_NATIONAL_HOLIDAY, year, 10, 26, HolidayType.OTHER, OFFICIAL_DAY_OFF,
        ))
    holidays.add(christian.all_saints_day(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.immaculate_conception(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.christmas_day(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.second_christmas_day(year, OFFICIAL_DAY_OFF))


def _carinthia(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.saint_josephs_day(year, STATE_HOLIDAY))
    holidays.add(common.fixed(
        HolidayName.CARINTHIAN_PLEBISCITE_DAY, year, 10, 10, HolidayType.OTHER, STATE_HOLIDAY,
    ))


def _upper_austria(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.religious_fixed(HolidayName.SAINT_FLORIANS_DAY, year, 5, 4, STATE_HOLIDAY))


def _salzburg(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.religious_fixed(HolidayName.SAINT_RUPERTS_DAY, year, 9, 24, STATE_HOLIDAY))


def _vienna(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.religious_fixed(HolidayName.LEOPOLDS_DAY, year, 11, 15, STATE_HOLIDAY))


AUSTRIA = RegionProvider("AT", "Austria", _austria)

CARINTHIA = AUSTRIA.child("AT-2", "Carinthia", _carinthia)
UPPER_AUSTRIA = AUSTRIA.child("AT-4", "Upper Austria", _upper_austria)
SALZBURG = AUSTRIA.child("AT-5", "Salzburg", _salzburg)
VIENNA = AUSTRIA.child("AT-9", "Vienna", _vienna)

REGIONS = [
    AUSTRIA,
    CARINTHIA,
    UPPER_AUSTRIA,
    SALZBURG,
    VIENNA,
]
