"""
holidaycalc Regions

Built-in region providers, one module per country:
- Germany (DE) and its 16 states
- France (FR) with overseas departments and Alsace-Moselle
- Switzerland (CH) with a selection of cantons
- Austria (AT) with state patron days
- United States (US) federal holidays with observed days

Usage:
    from holidaycalc.regions import BUILTIN_REGIONS
    from holidaycalc.regions.germany import SAXONY

    holidays = SAXONY.calculate_holidays_for_year(2024)
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from . import austria, france, germany, switzerland, united_states
from ..providers import RegionProvider

if TYPE_CHECKING:
    from ..registry import RegionRegistry


BUILTIN_REGIONS: list[RegionProvider] = [
    *germany.REGIONS,
    *france.REGIONS,
    *switzerland.REGIONS,
    *austria.REGIONS,
    *united_states.REGIONS,
]


def register_builtin_regions(registry: "RegionRegistry") -> None:
    """Register every built-in region on ``registry``."""
    for provider in BUILTIN_REGIONS:
        registry.register(provider)


__all__ = [
    "BUILTIN_REGIONS",
    "register_builtin_regions",
    "austria",
    "france",
    "germany",
    "switzerland",
    "united_states",
]
