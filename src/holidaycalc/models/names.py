"""
Stable machine identifiers for holidays.

Display strings are not part of the calculation core; a Translator maps these
identifiers to localized names at formatting time.
"""
from __future__ import annotations


class HolidayName:
    """Holiday name constants."""

    SUFFIX_COMPENSATORY = "_compensatory"

    # Common
    NEW_YEAR = "new_year"
    NEW_YEAR_COMPENSATORY = NEW_YEAR + SUFFIX_COMPENSATORY
    NEW_YEARS_EVE = "new_years_eve"
    INTERNATIONAL_WOMENS_DAY = "international_womens_day"
    LABOR_DAY = "labor_day"
    VICTORY_IN_EUROPE_DAY = "victory_in_europe_day"
    WORLD_CHILDRENS_DAY = "world_childrens_day"

    # Christian
    EPIPHANY = "epiphany"
    SAINT_JOSEPHS_DAY = "saint_josephs_day"
    ASH_WEDNESDAY = "ash_wednesday"
    MAUNDY_THURSDAY = "maundy_thursday"
    GOOD_FRIDAY = "good_friday"
    EASTER_SUNDAY = "easter_sunday"
    EASTER_MONDAY = "easter_monday"
    ASCENSION = "ascension"
    WHIT_SUNDAY = "whit_sunday"
    WHIT_MONDAY = "whit_monday"
    CORPUS_CHRISTI = "corpus_christi"
    ASSUMPTION_DAY = "assumption_day"
    REFORMATION_DAY = "reformation_day"
    ALL_SAINTS_DAY = "all_saints_day"
    REPENTANCE_AND_PRAYER_DAY = "repentance_and_prayer_day"
    IMMACULATE_CONCEPTION = "immaculate_conception"
    CHRISTMAS_EVE = "christmas_eve"
    CHRISTMAS_DAY = "christmas_day"
    CHRISTMAS_DAY_COMPENSATORY = CHRISTMAS_DAY + SUFFIX_COMPENSATORY
    SECOND_CHRISTMAS_DAY = "second_christmas_day"

    # Austria
    AUSTRIAN_NATIONAL_HOLIDAY = "austrian_national_holiday"
    AUSTRIAN_STATES_HOLIDAY = "austrian_states_holiday"
    CARINTHIAN_PLEBISCITE_DAY = "carinthian_plebiscite_day"
    LEOPOLDS_DAY = "leopolds_day"
    SAINT_FLORIANS_DAY = "saint_florians_day"
    SAINT_RUPERTS_DAY = "saint_ruperts_day"

    # France
    ABOLITION_OF_SLAVERY = "abolition_of_slavery"
    ARMISTICE_DAY_FRANCE = "armistice_day_france"
    BASTILLE_DAY = "bastille_day"
    SAINT_STEPHENS_DAY = "saint_stephens_day"

    # Germany
    AUGSBURGER_FRIEDENSFEST = "augsburger_friedensfest"
    GERMAN_UNITY_DAY = "german_unity_day"

    # Switzerland
    BERCHTOLDSTAG = "berchtoldstag"
    FEDERAL_DAY_OF_THANKSGIVING = "federal_day_of_thanksgiving"
    GENEVA_RESTORATION_OF_THE_REPUBLIC = "geneva_restoration_of_the_republic"
    GENFER_BETTAG = "genfer_bettag"
    SWISS_NATIONAL_DAY = "swiss_national_day"

    # United States
    MARTIN_LUTHER_KING_JR_DAY = "martin_luther_king_jr_day"
    WASHINGTONS_BIRTHDAY = "washingtons_birthday"
    MEMORIAL_DAY = "memorial_day"
    JUNETEENTH = "juneteenth"
    INDEPENDENCE_DAY = "independence_day"
    INDEPENDENCE_DAY_COMPENSATORY = INDEPENDENCE_DAY + SUFFIX_COMPENSATORY
    US_LABOR_DAY = "us_labor_day"
    COLUMBUS_DAY = "columbus_day"
    VETERANS_DAY = "veterans_day"
    VETERANS_DAY_COMPENSATORY = VETERANS_DAY + SUFFIX_COMPENSATORY
    THANKSGIVING_DAY = "thanksgiving_day"

    # Weekdays
    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @classmethod
    def compensatory(cls, name: str) -> str:
        """Return the compensatory variant of a holiday name."""
        return name + cls.SUFFIX_COMPENSATORY

    @classmethod
    def base_name(cls, name: str) -> str:
        """Strip the compensatory suffix, if present."""
        if name.endswith(cls.SUFFIX_COMPENSATORY):
            return name[: -len(cls.SUFFIX_COMPENSATORY)]
        return name

    @classmethod
    def is_compensatory(cls, name: str) -> bool:
        return name.endswith(cls.SUFFIX_COMPENSATORY)
