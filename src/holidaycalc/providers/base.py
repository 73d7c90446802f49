"""
holidaycalc Provider Base

Provides the protocol and the delegating implementation for holiday
providers.

The provider system is pluggable: each region is a RegionProvider whose rule
function is layered on top of its parent region's complete result. Regions
compose by delegation, never by removing or editing parent entries.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, runtime_checkable

from ..models import HolidayList, HolidayListBuilder

# A region's own rules: append that region's entries for ``year``
RuleFunction = Callable[[int, HolidayListBuilder], None]


@runtime_checkable
class HolidayProvider(Protocol):
    """
    Protocol for holiday providers.

    Implementations return every holiday of a year as a new list.
    Repeated calls with the same year must return equal lists.
    """

    def calculate_holidays_for_year(self, year: int) -> HolidayList:
        """
        Calculate all holidays of a year.

        Args:
            year: Calendar year

        Returns:
            Holidays of the year in rule order
        """
        ...


def no_rules(year: int, holidays: HolidayListBuilder) -> None:
    """Rule function for regions that only inherit their parent's holidays."""
    return None


@dataclass(frozen=True)
class RegionProvider:
    """
    Provider for a single region.

    The parent (if any) is evaluated first and its full result copied into
    the builder; ``rules`` then appends the region's own entries.

    Attributes:
        region_id: Region identifier (e.g. "DE-SN")
        name: Human-readable region name
        rules: Rule function adding the region-specific holidays
        parent: Provider of the enclosing region, or None for a root region
    """
    region_id: str
    name: str
    rules: RuleFunction = field(default=no_rules, repr=False, compare=False)
    parent: Optional[HolidayProvider] = field(default=None, repr=False)

    @property
    def parent_id(self) -> Optional[str]:
        return getattr(self.parent, "region_id", None)

    def calculate_holidays_for_year(self, year: int) -> HolidayList:
        holidays = HolidayListBuilder()
        if self.parent is not None:
            holidays.extend(self.parent.calculate_holidays_for_year(year))
        self.rules(year, holidays)
        return holidays.freeze()

    def child(self, region_id: str, name: str, rules: RuleFunction = no_rules) -> RegionProvider:
        """Create a sub-region provider delegating to this one."""
        return RegionProvider(region_id=region_id, name=name, rules=rules, parent=self)

    def lineage(self) -> list[str]:
        """Region ids from this region up to the root."""
        ids = [self.region_id]
        parent = self.parent
        while parent is not None:
            ids.append(getattr(parent, "region_id", type(parent).__name__))
            parent = getattr(parent, "parent", None)
        return ids
