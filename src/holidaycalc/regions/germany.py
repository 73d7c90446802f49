"""
Germany Holiday Rules

Nationwide holidays plus the additional holidays of the 16 states.

Nationwide (day off):
- New Year's Day, Good Friday, Easter Monday, Labor Day, Ascension,
  Whit Monday, German Unity Day (since 1990), Christmas Day, Second Christmas Day
- Reformation Day in 2017 only (500th anniversary)

Nationwide (not a day off): Whit Sunday, Repentance and Prayer Day,
Christmas Eve and New Year's Eve (half days).

States add holidays on top of the nationwide list; they never remove any.
"""
from __future__ import annotations

from ..models import (
    NO_FLAGS,
    OFFICIAL_DAY_OFF,
    OFFICIAL_PARTIAL_DAY_OFF,
    HolidayListBuilder,
    HolidayName,
    HolidayType,
)
from ..providers import RegionProvider
from ..rules import christian, common

# Reformation Day was a nationwide holiday for its 500th anniversary
REFORMATION_ANNIVERSARY_YEAR = 2017


def _germany(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(common.new_year(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.good_friday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.easter_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(common.labor_day(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.ascension(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.whit_sunday(year, HolidayType.DAY_OFF))
    holidays.add(christian.whit_monday(year, OFFICIAL_DAY_OFF))
    if year >= 1990:
        holidays.add(common.fixed(HolidayName.GERMAN_UNITY_DAY, year, 10, 3, HolidayType.OTHER, OFFICIAL_DAY_OFF))
    if year == REFORMATION_ANNIVERSARY_YEAR:
        holidays.add(christian.reformation_day(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.repentance_and_prayer_day(year, NO_FLAGS))
    holidays.add(christian.christmas_eve(year, HolidayType.HALF_DAY_OFF))
    holidays.add(christian.christmas_day(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.second_christmas_day(year, OFFICIAL_DAY_OFF))
    holidays.add(common.new_years_eve(year, HolidayType.HALF_DAY_OFF))


def _add_state_reformation_day(year: int, holidays: HolidayListBuilder, since: int = 1990) -> None:
    """Reformation Day as a state holiday; skipped when already nationwide."""
    if year >= since and year != REFORMATION_ANNIVERSARY_YEAR:
        holidays.add(christian.reformation_day(year, OFFICIAL_DAY_OFF))


# =============================================================================
# States
# =============================================================================

def _baden_wuerttemberg(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.epiphany(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.corpus_christi(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.all_saints_day(year, OFFICIAL_DAY_OFF))


def _bavaria(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.epiphany(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.corpus_christi(year, OFFICIAL_DAY_OFF))
    holidays.add(common.fixed(
        HolidayName.AUGSBURGER_FRIEDENSFEST, year, 8, 8, HolidayType.RELIGIOUS, OFFICIAL_PARTIAL_DAY_OFF,
    ))
    holidays.add(christian.assumption_day(year, OFFICIAL_PARTIAL_DAY_OFF))
    holidays.add(christian.all_saints_day(year, OFFICIAL_DAY_OFF))


def _berlin(year: int, holidays: HolidayListBuilder) -> None:
    if year >= 2019:
        holidays.add(common.international_womens_day(year, OFFICIAL_DAY_OFF))
    # 75th and 80th anniversary of the end of the war in Europe
    if year in (2020, 2025):
        holidays.add(common.victory_in_europe_day(year, OFFICIAL_DAY_OFF))


def _brandenburg(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.easter_sunday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.whit_sunday(year, OFFICIAL_DAY_OFF))
    _add_state_reformation_day(year, holidays)


def _northern_reformation_state(year: int, holidays: HolidayListBuilder) -> None:
    """Bremen, Hamburg, Lower Saxony and Schleswig-Holstein (since 2018)."""
    _add_state_reformation_day(year, holidays, since=2018)


def _hesse(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.corpus_christi(year, OFFICIAL_DAY_OFF))


def _mecklenburg_vorpommern(year: int, holidays: HolidayListBuilder) -> None:
    if year >= 2023:
        holidays.add(common.international_womens_day(year, OFFICIAL_DAY_OFF))
    _add_state_reformation_day(year, holidays)


def _corpus_christi_and_all_saints(year: int, holidays: HolidayListBuilder) -> None:
    """North Rhine-Westphalia and Rhineland-Palatinate."""
    holidays.add(christian.corpus_christi(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.all_saints_day(year, OFFICIAL_DAY_OFF))


def _saarland(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.corpus_christi(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.assumption_day(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.all_saints_day(year, OFFICIAL_DAY_OFF))


def _saxony(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.corpus_christi(year, HolidayType.DAY_OFF | HolidayType.PARTIAL_ONLY))
    _add_state_reformation_day(year, holidays)
    holidays.add(christian.repentance_and_prayer_day(year, OFFICIAL_DAY_OFF))


def _saxony_anhalt(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.epiphany(year, OFFICIAL_DAY_OFF))
    _add_state_reformation_day(year, holidays)


def _thuringia(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.corpus_christi(year, OFFICIAL_PARTIAL_DAY_OFF))
    _add_state_reformation_day(year, holidays)
    if year >= 2019:
        holidays.add(common.fixed(
            HolidayName.WORLD_CHILDRENS_DAY, year, 9, 20, HolidayType.OTHER, OFFICIAL_DAY_OFF,
        ))


GERMANY = RegionProvider("DE", "Germany", _germany)

BADEN_WUERTTEMBERG = GERMANY.child("DE-BW", "Baden-Württemberg", _baden_wuerttemberg)
BAVARIA = GERMANY.child("DE-BY", "Bavaria", _bavaria)
BERLIN = GERMANY.child("DE-BE", "Berlin", _berlin)
BRANDENBURG = GERMANY.child("DE-BB", "Brandenburg", _brandenburg)
BREMEN = GERMANY.child("DE-HB", "Bremen", _northern_reformation_state)
HAMBURG = GERMANY.child("DE-HH", "Hamburg", _northern_reformation_state)
HESSE = GERMANY.child("DE-HE", "Hesse", _hesse)
MECKLENBURG_VORPOMMERN = GERMANY.child("DE-MV", "Mecklenburg-Vorpommern", _mecklenburg_vorpommern)
LOWER_SAXONY = GERMANY.child("DE-NI", "Lower Saxony", _northern_reformation_state)
NORTH_RHINE_WESTPHALIA = GERMANY.child("DE-NW", "North Rhine-Westphalia", _corpus_christi_and_all_saints)
RHINELAND_PALATINATE = GERMANY.child("DE-RP", "Rhineland-Palatinate", _corpus_christi_and_all_saints)
SAARLAND = GERMANY.child("DE-SL", "Saarland", _saarland)
SAXONY = GERMANY.child("DE-SN", "Saxony", _saxony)
SAXONY_ANHALT = GERMANY.child("DE-ST", "Saxony-Anhalt", _saxony_anhalt)
SCHLESWIG_HOLSTEIN = GERMANY.child("DE-SH", "Schleswig-Holstein", _northern_reformation_state)
THURINGIA = GERMANY.child("DE-TH", "Thuringia", _thuringia)

REGIONS = [
    GERMANY,
    BADEN_WUERTTEMBERG,
    BAVARIA,
    BERLIN,
    BRANDENBURG,
    BREMEN,
    HAMBURG,
    HESSE,
    MECKLENBURG_VORPOMMERN,
    LOWER_SAXONY,
    NORTH_RHINE_WESTPHALIA,
    RHINELAND_PALATINATE,
    SAARLAND,
    SAXONY,
    SAXONY_ANHALT,
    SCHLESWIG_HOLSTEIN,
    THURINGIA,
]
