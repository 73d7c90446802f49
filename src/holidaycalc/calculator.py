"""
holidaycalc Calculator

Resolves region identifiers to providers and calculates holidays.

The calculator holds no state besides its registry, so one instance can be
reused across years and regions.

Usage:
    calculator = HolidayCalculator()
    holidays = calculator.calculate_holidays_for_year(2024, "DE-BY")
    both = calculator.calculate(["DE", "AT"], 2024)
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from . import dates
from .filters import merge_holiday_lists
from .models import HolidayList
from .registry import RegionRegistry, default_registry

logger = logging.getLogger(__name__)


class HolidayCalculator:
    """Calculates holiday lists for registered regions."""

    def __init__(self, registry: Optional[RegionRegistry] = None):
        """
        Args:
            registry: Region registry; ``default_registry()`` when omitted
        """
        self.registry = registry if registry is not None else default_registry()

    def calculate_holidays_for_year(self, year: int, region_id: str) -> HolidayList:
        """
        Calculate all holidays of a region in a year.

        Raises:
            InvalidYearError: If the year is outside the supported range
            RegionNotFoundError: If the region id is not registered
        """
        dates.validate_year(year)
        provider = self.registry.resolve(region_id)
        holidays = provider.calculate_holidays_for_year(year)
        logger.debug("Calculated %d holidays for %s in %d", len(holidays), region_id, year)
        return holidays

    def calculate(self, region_ids: Iterable[str], year: int) -> HolidayList:
        """Holidays of several regions in one year, sorted by date."""
        return merge_holiday_lists(
            self.calculate_holidays_for_year(year, region_id) for region_id in region_ids
        )

    def calculate_for_years(self, first_year: int, last_year: int, region_id: str) -> HolidayList:
        """Holidays of a region over an inclusive year range, sorted by date."""
        return merge_holiday_lists(
            self.calculate_holidays_for_year(year, region_id)
            for year in range(first_year, last_year + 1)
        )
