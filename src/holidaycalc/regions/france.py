"""
France Holiday Rules

Metropolitan France plus overseas departments and Alsace-Moselle.

Whit Monday is only part of the list from 2008, when it became a regular
day off again after the "journée de solidarité" years.
"""
from __future__ import annotations

from ..models import OFFICIAL_DAY_OFF, HolidayListBuilder, HolidayName, HolidayType
from ..providers import RegionProvider
from ..rules import christian, common


WHIT_MONDAY_RESTORED_YEAR = 2008


def _france(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(common.new_year(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.easter_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(common.labor_day(year, OFFICIAL_DAY_OFF))
    holidays.add(common.victory_in_europe_day(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.ascension(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.whit_sunday(year, OFFICIAL_DAY_OFF))
    if year >= WHIT_MONDAY_RESTORED_YEAR:
        holidays.add(christian.whit_monday(year, OFFICIAL_DAY_OFF))
    holidays.add(common.fixed(HolidayName.BASTILLE_DAY, year, 7, 14, HolidayType.OTHER, OFFICIAL_DAY_OFF))
    holidays.add(christian.assumption_day(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.all_saints_day(year, OFFICIAL_DAY_OFF))
    holidays.add(common.fixed(HolidayName.ARMISTICE_DAY_FRANCE, year, 11, 11, HolidayType.OTHER, OFFICIAL_DAY_OFF))
    holidays.add(christian.christmas_day(year, OFFICIAL_DAY_OFF))


def _abolition_of_slavery(month: int, day: int):
    """Overseas departments commemorate abolition on different days."""
    def rules(year: int, holidays: HolidayListBuilder) -> None:
        holidays.add(common.fixed(
            HolidayName.ABOLITION_OF_SLAVERY, year, month, day, HolidayType.OTHER, OFFICIAL_DAY_OFF,
        ))
    return rules


def _martinique(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.good_friday(year, OFFICIAL_DAY_OFF))
    _abolition_of_slavery(5, 22)(year, holidays)


def _guadeloupe(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.good_friday(year, OFFICIAL_DAY_OFF))
    _abolition_of_slavery(5, 27)(year, holidays)


def _alsace_moselle(year: int, holidays: HolidayListBuilder) -> None:
    holidays.add(christian.good_friday(year, OFFICIAL_DAY_OFF))
    holidays.add(christian.religious_fixed(HolidayName.SAINT_STEPHENS_DAY, year, 12, 26, OFFICIAL_DAY_OFF))


FRANCE = RegionProvider("FR", "France", _france)

MARTINIQUE = FRANCE.child("FR-MQ", "Martinique", _martinique)
GUADELOUPE = FRANCE.child("FR-GP", "Guadeloupe", _guadeloupe)
REUNION = FRANCE.child("FR-RE", "Réunion", _abolition_of_slavery(12, 20))
ALSACE_MOSELLE = FRANCE.child("FR-ALM", "Alsace-Moselle", _alsace_moselle)

REGIONS = [
    FRANCE,
    MARTINIQUE,
    GUADELOUPE,
    REUNION,
    ALSACE_MOSELLE,
]
