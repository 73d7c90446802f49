"""
Tests for the built-in regions

Covers:
- Complete reference years for France, Basel-Landschaft and Schleswig-Holstein
- Sub-regions always contain their parent's holidays
- Year-dependent rules (Reformation Day, Berlin, Whit Monday in France)
- Switzerland, Austria and US specifics, including observed days
"""
from datetime import date

import pytest

from holidaycalc.models import OFFICIAL_DAY_OFF, HolidayName, HolidayType


def _sorted_dates(calculator, year, region_id):
    return sorted(h.simple_date for h in calculator.calculate_holidays_for_year(year, region_id))


class TestReferenceYears:
    """Complete holiday lists for reference years."""

    @pytest.mark.parametrize("region_id,year,expected", [
        ("FR", 2004, [
            "2004-01-01", "2004-04-12", "2004-05-01", "2004-05-08", "2004-05-20", "2004-05-30",
            "2004-07-14", "2004-08-15", "2004-11-01", "2004-11-11", "2004-12-25",
        ]),
        ("FR", 2019, [
            "2019-01-01", "2019-04-22", "2019-05-01", "2019-05-08", "2019-05-30", "2019-06-09",
            "2019-06-10", "2019-07-14", "2019-08-15", "2019-11-01", "2019-11-11", "2019-12-25",
        ]),
        ("CH-BL", 2020, [
            "2020-01-01", "2020-01-02", "2020-04-10", "2020-04-13", "2020-05-01", "2020-05-21",
            "2020-06-01", "2020-06-11", "2020-08-01", "2020-08-15", "2020-09-06", "2020-12-25",
            "2020-12-26",
        ]),
        ("DE-SH", 2019, [
            "2019-01-01", "2019-04-19", "2019-04-22", "2019-05-01", "2019-05-30", "2019-06-09",
            "2019-06-10", "2019-10-03", "2019-10-31", "2019-11-20", "2019-12-24", "2019-12-25",
            "2019-12-26", "2019-12-31",
        ]),
    ])
    def test_reference_year(self, calculator, region_id, year, expected):
        assert _sorted_dates(calculator, year, region_id) == expected


class TestRegionComposition:
    """Sub-regions add to their parent's list and never remove from it."""

    def test_children_contain_parent_holidays(self, registry, calculator):
        checked = 0
        for region_id in registry.region_ids():
            provider = registry.resolve(region_id)
            parent_id = getattr(provider, "parent_id", None)
            if parent_id is None:
                continue
            for year in (1995, 2004, 2017, 2019, 2020, 2024, 2030):
                parent = set(calculator.calculate_holidays_for_year(year, parent_id))
                child = set(calculator.calculate_holidays_for_year(year, region_id))
                assert parent <= child, (region_id, year)
            checked += 1
        assert checked > 20

    def test_parent_entries_come_first(self, calculator):
        parent = calculator.calculate_holidays_for_year(2024, "DE")
        child = calculator.calculate_holidays_for_year(2024, "DE-BY")
        assert child[:len(parent)] == parent

    @pytest.mark.parametrize("region_id", ["DE", "DE-BY", "CH-GE", "AT-9", "FR-ALM", "US"])
    def test_deterministic(self, calculator, region_id):
        first = calculator.calculate_holidays_for_year(2024, region_id)
        assert first == calculator.calculate_holidays_for_year(2024, region_id)


class TestGermany:
    """Germany and its states."""

    def test_nationwide_reformation_day_in_2017(self, calculator):
        holidays = calculator.calculate_holidays_for_year(2017, "DE")
        assert [h.simple_date for h in holidays.by_name(HolidayName.REFORMATION_DAY)] == ["2017-10-31"]
        assert not calculator.calculate_holidays_for_year(2016, "DE").contains_name(HolidayName.REFORMATION_DAY)

    @pytest.mark.parametrize("region_id", ["DE-SH", "DE-SN", "DE-BB", "DE-TH"])
    def test_reformation_day_not_doubled_in_2017(self, calculator, region_id):
        holidays = calculator.calculate_holidays_for_year(2017, region_id)
        assert len(holidays.by_name(HolidayName.REFORMATION_DAY)) == 1

    def test_northern_states_since_2018(self, calculator):
        assert not calculator.calculate_holidays_for_year(2016, "DE-HH").contains_name(HolidayName.REFORMATION_DAY)
        assert calculator.calculate_holidays_for_year(2018, "DE-HH").contains_name(HolidayName.REFORMATION_DAY)

    def test_german_unity_day_since_1990(self, calculator):
        assert not calculator.calculate_holidays_for_year(1989, "DE").contains_name(HolidayName.GERMAN_UNITY_DAY)
        assert calculator.calculate_holidays_for_year(1990, "DE").contains_name(HolidayName.GERMAN_UNITY_DAY)

    def test_repentance_day_off_only_in_saxony(self, calculator):
        nationwide = calculator.calculate_holidays_for_year(2024, "DE").by_name(
            HolidayName.REPENTANCE_AND_PRAYER_DAY
        )
        assert len(nationwide) == 1
        assert nationwide[0].date == date(2024, 11, 20)
        assert not nationwide[0].has_type(HolidayType.DAY_OFF)

        saxony = calculator.calculate_holidays_for_year(2024, "DE-SN").by_name(
            HolidayName.REPENTANCE_AND_PRAYER_DAY
        )
        assert any(h.has_type(OFFICIAL_DAY_OFF) for h in saxony)

    @pytest.mark.parametrize("year,expected", [(2019, False), (2020, True), (2021, False), (2025, True)])
    def test_berlin_victory_in_europe_day(self, calculator, year, expected):
        holidays = calculator.calculate_holidays_for_year(year, "DE-BE")
        assert holidays.contains_name(HolidayName.VICTORY_IN_EUROPE_DAY) is expected

    def test_berlin_womens_day_since_2019(self, calculator):
        assert not calculator.calculate_holidays_for_year(2018, "DE-BE").contains_name(
            HolidayName.INTERNATIONAL_WOMENS_DAY
        )
        assert calculator.calculate_holidays_for_year(2019, "DE-BE").contains_date(date(2019, 3, 8))

    def test_augsburg_is_partial(self, calculator):
        holiday = calculator.calculate_holidays_for_year(2024, "DE-BY").by_name(
            HolidayName.AUGSBURGER_FRIEDENSFEST
        )[0]
        assert holiday.has_type(HolidayType.PARTIAL_ONLY | HolidayType.DAY_OFF)

    def test_christmas_eve_is_half_day(self, calculator):
        holiday = calculator.calculate_holidays_for_year(2024, "DE").by_name(HolidayName.CHRISTMAS_EVE)[0]
        assert holiday.has_type(HolidayType.HALF_DAY_OFF)
        assert not holiday.has_type(HolidayType.DAY_OFF)


class TestFrance:
    """France and its sub-regions."""

    def test_whit_monday_restored_in_2008(self, calculator):
        assert not calculator.calculate_holidays_for_year(2007, "FR").contains_name(HolidayName.WHIT_MONDAY)
        assert calculator.calculate_holidays_for_year(2008, "FR").contains_name(HolidayName.WHIT_MONDAY)

    @pytest.mark.parametrize("region_id,expected", [
        ("FR-MQ", date(2024, 5, 22)),
        ("FR-GP", date(2024, 5, 27)),
        ("FR-RE", date(2024, 12, 20)),
    ])
    def test_abolition_of_slavery(self, calculator, region_id, expected):
        holidays = calculator.calculate_holidays_for_year(2024, region_id)
        assert holidays.by_name(HolidayName.ABOLITION_OF_SLAVERY)[0].date == expected

    def test_alsace_moselle(self, calculator):
        holidays = calculator.calculate_holidays_for_year(2024, "FR-ALM")
        assert holidays.contains_date(date(2024, 3, 29))
        assert holidays.contains_name(HolidayName.SAINT_STEPHENS_DAY)


class TestSwitzerland:
    """Switzerland and its cantons."""

    def test_aargau_labor_day_on_monday(self, calculator):
        # May 1, 2023 is a Monday
        labor_day = calculator.calculate_holidays_for_year(2023, "CH-AG").by_name(HolidayName.LABOR_DAY)[0]
        assert labor_day.type == HolidayType.OTHER | HolidayType.DAY_OFF | HolidayType.PARTIAL_ONLY

    def test_aargau_labor_day_other_weekdays(self, calculator):
        labor_day = calculator.calculate_holidays_for_year(2024, "CH-AG").by_name(HolidayName.LABOR_DAY)[0]
        assert labor_day.type == HolidayType.OTHER | HolidayType.HALF_DAY_OFF | HolidayType.PARTIAL_ONLY

    def test_geneva_fast(self, calculator):
        holidays = calculator.calculate_holidays_for_year(2020, "CH-GE")
        assert holidays.by_name(HolidayName.GENFER_BETTAG)[0].date == date(2020, 9, 10)
        assert holidays.contains_name(HolidayName.GENEVA_RESTORATION_OF_THE_REPUBLIC)


class TestAustria:
    """Austria and its states."""

    def test_national_holiday_since_1965(self, calculator):
        assert not calculator.calculate_holidays_for_year(1964, "AT").contains_name(
            HolidayName.AUSTRIAN_NATIONAL_HOLIDAY
        )
        assert calculator.calculate_holidays_for_year(1965, "AT").contains_date(date(1965, 10, 26))

    def test_state_patron_days_close_schools(self, calculator):
        leopold = calculator.calculate_holidays_for_year(2024, "AT-9").by_name(HolidayName.LEOPOLDS_DAY)[0]
        assert leopold.date == date(2024, 11, 15)
        assert leopold.has_type(HolidayType.NO_SCHOOL)
        assert not leopold.has_type(HolidayType.DAY_OFF)


class TestUnitedStates:
    """US federal holidays and observed days."""

    def test_2021(self, calculator):
        assert _sorted_dates(calculator, 2021, "US") == [
            "2021-01-01", "2021-01-18", "2021-02-15", "2021-05-31", "2021-06-18", "2021-06-19",
            "2021-07-04", "2021-07-05", "2021-09-06", "2021-10-11", "2021-11-11", "2021-11-25",
            "2021-12-24", "2021-12-25", "2021-12-31",
        ]

    def test_new_year_observed_in_previous_year(self, calculator):
        holidays_2021 = calculator.calculate_holidays_for_year(2021, "US")
        observed = holidays_2021.by_name(HolidayName.NEW_YEAR_COMPENSATORY)
        assert [h.date for h in observed] == [date(2021, 12, 31)]
        assert observed[0].has_type(HolidayType.COMPENSATORY | OFFICIAL_DAY_OFF)

        holidays_2022 = calculator.calculate_holidays_for_year(2022, "US")
        assert all(h.year == 2022 for h in holidays_2022)
        assert not holidays_2022.contains_name(HolidayName.NEW_YEAR_COMPENSATORY)

    def test_juneteenth_since_2021(self, calculator):
        assert not calculator.calculate_holidays_for_year(2020, "US").contains_name(HolidayName.JUNETEENTH)
        assert calculator.calculate_holidays_for_year(2022, "US").contains_date(date(2022, 6, 20))

    def test_every_year_stays_in_year(self, calculator):
        for year in range(1990, 2040):
            assert all(h.year == year for h in calculator.calculate_holidays_for_year(year, "US"))
