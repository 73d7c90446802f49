"""
Tests for holidaycalc.registry and holidaycalc.calculator

Covers:
- Region registration and case-insensitive resolution
- Unknown-region errors listing the available ids
- Default registry contents
- Calculator year validation and multi-region/multi-year merging
"""
import logging
from datetime import date

import pytest

from holidaycalc import HolidayCalculator, RegionRegistry, default_registry
from holidaycalc.config import Settings
from holidaycalc.exceptions import (
    InvalidYearError,
    RegionNotFoundError,
    RulePackLoadError,
    RulePackValidationError,
)
from holidaycalc.models import Holiday
from holidaycalc.providers import RegionProvider


def _rules(year, holidays):
    holidays.add(Holiday("founding_day", date(year, 4, 1)))


@pytest.fixture
def small_registry():
    return RegionRegistry([RegionProvider("XX", "Example", _rules)])


class TestRegionRegistry:
    """Tests for RegionRegistry."""

    def test_resolve_case_insensitive(self, small_registry):
        assert small_registry.resolve("xx") is small_registry.resolve(" XX ")

    def test_contains_and_len(self, small_registry):
        assert "xx" in small_registry
        assert "YY" not in small_registry
        assert 42 not in small_registry
        assert len(small_registry) == 1
        assert list(small_registry) == ["XX"]

    def test_get_returns_none_for_unknown(self, small_registry):
        assert small_registry.get("YY") is None

    def test_duplicate_registration_rejected(self, small_registry):
        with pytest.raises(ValueError):
            small_registry.register(RegionProvider("xx", "Duplicate"))

    def test_replace(self, small_registry):
        replacement = RegionProvider("XX", "Replacement")
        small_registry.register(replacement, replace=True)
        assert small_registry.resolve("XX") is replacement
        assert len(small_registry) == 1

    def test_register_under_explicit_id(self, small_registry):
        provider = RegionProvider("XX-A", "Alias target")
        small_registry.register(provider, region_id="ALIAS")
        assert small_registry.resolve("alias") is provider

    def test_register_without_id_rejected(self, small_registry):
        with pytest.raises(ValueError):
            small_registry.register(object())

    def test_unknown_region(self, small_registry):
        with pytest.raises(RegionNotFoundError) as exc_info:
            small_registry.resolve("YY")
        assert exc_info.value.region_id == "YY"
        assert exc_info.value.code == "HC_REGION_NOT_FOUND"

    def test_available_ids_in_details(self, registry):
        with pytest.raises(RegionNotFoundError) as exc_info:
            registry.resolve("DE-SX")
        available = exc_info.value.details["available"]
        assert "DE-SN" in available
        assert available == registry.region_ids()

    def test_children_of(self, small_registry):
        parent = small_registry.resolve("XX")
        small_registry.register(parent.child("XX-A", "Child A"))
        small_registry.register(parent.child("XX-B", "Child B"))
        assert small_registry.children_of("xx") == ["XX-A", "XX-B"]
        assert small_registry.children_of("XX-A") == []


class TestDefaultRegistry:
    """Tests for default_registry()."""

    @pytest.mark.parametrize("region_id", [
        "DE", "DE-BY", "DE-SN", "AT", "AT-9", "CH", "CH-BL", "FR", "FR-ALM", "US",
        "BE", "BE-VLG", "DK", "LU", "weekday:sunday", "weekday:saturday",
    ])
    def test_contains(self, registry, region_id):
        assert region_id in registry

    def test_german_states(self, registry):
        assert len(registry.children_of("DE")) == 16

    def test_belgian_communities_from_packs(self, registry):
        assert set(registry.children_of("BE")) == {"BE-VLG", "BE-WAL", "BE-DG"}

    def test_fresh_registry_per_call(self):
        assert default_registry(Settings()) is not default_registry(Settings())

    def test_extra_pack_path(self, tmp_path):
        (tmp_path / "xk.yaml").write_text(
            "region_id: XK\n"
            "name: Example Pack\n"
            "rules:\n"
            "  - name: pack_day\n"
            "    kind: fixed\n"
            "    month: 3\n"
            "    day: 3\n",
            encoding="utf-8",
        )
        registry = default_registry(Settings(pack_paths=(str(tmp_path),)))
        holidays = registry.resolve("XK").calculate_holidays_for_year(2024)
        assert holidays.simple_dates() == ["2024-03-03"]

    @staticmethod
    def _write_cyclic_packs(directory):
        for region_id, parent in (("AA", "BB"), ("BB", "AA")):
            (directory / f"{region_id.lower()}.yaml").write_text(
                f"region_id: {region_id}\nname: Pack {region_id}\nparent: {parent}\n",
                encoding="utf-8",
            )

    def test_cyclic_pack_parents_strict(self, tmp_path):
        self._write_cyclic_packs(tmp_path)
        with pytest.raises(RulePackValidationError) as exc_info:
            default_registry(Settings(pack_paths=(str(tmp_path),)))
        assert exc_info.value.details["chain"] == ["BB", "AA", "BB"]

    def test_cyclic_pack_parents_lenient(self, tmp_path):
        self._write_cyclic_packs(tmp_path)
        registry = default_registry(Settings(pack_paths=(str(tmp_path),), strict_packs=False))
        assert "AA" in registry
        assert "BB" not in registry

    def test_missing_pack_path_strict(self, tmp_path):
        with pytest.raises(RulePackLoadError):
            default_registry(Settings(pack_paths=(str(tmp_path / "missing"),)))

    def test_missing_pack_path_lenient(self, tmp_path):
        registry = default_registry(Settings(pack_paths=(str(tmp_path / "missing"),), strict_packs=False))
        assert "DE" in registry


class TestHolidayCalculator:
    """Tests for HolidayCalculator."""

    @pytest.mark.parametrize("year", [1582, 10000])
    def test_invalid_year(self, calculator, year):
        with pytest.raises(InvalidYearError):
            calculator.calculate_holidays_for_year(year, "DE")

    @pytest.mark.parametrize("year", [1583, 9999])
    def test_boundary_years(self, calculator, year):
        assert len(calculator.calculate_holidays_for_year(year, "DE")) > 0

    @pytest.mark.parametrize("year", [1583, 9999])
    def test_weekday_region_boundary_years(self, calculator, year):
        holidays = calculator.calculate_holidays_for_year(year, "weekday:sunday")
        assert len(holidays) == 52
        assert all(h.date.year == year for h in holidays)

    def test_invalid_year_checked_before_region(self, calculator):
        with pytest.raises(InvalidYearError):
            calculator.calculate_holidays_for_year(1000, "ZZ")

    def test_unknown_region(self, calculator):
        with pytest.raises(RegionNotFoundError):
            calculator.calculate_holidays_for_year(2024, "ZZ")

    def test_case_insensitive(self, calculator):
        assert calculator.calculate_holidays_for_year(2024, "de-by") == calculator.calculate_holidays_for_year(
            2024, "DE-BY"
        )

    def test_one_debug_record_per_calculation(self, calculator, caplog):
        with caplog.at_level(logging.DEBUG, logger="holidaycalc"):
            calculator.calculate_holidays_for_year(2024, "DE-SN")
        records = [r for r in caplog.records if r.getMessage().startswith("Calculated")]
        assert len(records) == 1
        assert records[0].name == "holidaycalc.calculator"

    def test_calculate_several_regions(self, calculator):
        merged = calculator.calculate(["DE", "AT"], 2024)
        de = calculator.calculate_holidays_for_year(2024, "DE")
        at = calculator.calculate_holidays_for_year(2024, "AT")
        assert len(merged) == len(de) + len(at)
        assert merged.dates() == sorted(merged.dates())

    def test_calculate_for_years(self, calculator):
        merged = calculator.calculate_for_years(2023, 2025, "FR")
        assert len(merged) == sum(
            len(calculator.calculate_holidays_for_year(year, "FR")) for year in (2023, 2024, 2025)
        )
        assert merged[0].simple_date == "2023-01-01"
        assert merged[-1].simple_date == "2025-12-25"

    def test_weekday_region(self, calculator):
        assert len(calculator.calculate_holidays_for_year(2024, "weekday:sunday")) == 52

    def test_default_constructor(self):
        calculator = HolidayCalculator()
        assert "DE" in calculator.registry
