"""
holidaycalc Holiday Models

Core value types:
- Holiday: a single dated holiday occurrence
- HolidayList: an immutable, ordered collection of holidays
- HolidayListBuilder: the mutable companion used while a provider
  assembles a year; frozen into a HolidayList before it is returned

Lists never deduplicate on insert. Use IncludeUniqueDateFilter for that.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Iterable, Iterator, Sequence, Union, overload

from .enums import HolidayType
from .names import HolidayName


SIMPLE_DATE_FORMAT = "%Y-%m-%d"


# =============================================================================
# Holiday
# =============================================================================

@dataclass(frozen=True)
class Holiday:
    """
    A single holiday occurrence.

    Attributes:
        name: Stable machine identifier (e.g. "good_friday")
        date: Calendar date, no time component
        type: Bitmask of HolidayType flags
    """
    name: str
    date: date
    type: HolidayType = HolidayType.OTHER

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Holiday name must not be empty")
        # Zoned or naive timestamps are truncated to their calendar date
        if isinstance(self.date, datetime):
            object.__setattr__(self, "date", self.date.date())
        object.__setattr__(self, "type", HolidayType(self.type))

    @classmethod
    def create(
        cls,
        name: str,
        simple_date: str,
        type: HolidayType = HolidayType.OTHER,
    ) -> Holiday:
        """Create a holiday from an ISO "YYYY-MM-DD" date string."""
        return cls(
            name=name,
            date=datetime.strptime(simple_date, SIMPLE_DATE_FORMAT).date(),
            type=type,
        )

    @property
    def simple_date(self) -> str:
        """ISO date string ("YYYY-MM-DD")."""
        return self.date.strftime(SIMPLE_DATE_FORMAT)

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def is_compensatory(self) -> bool:
        return bool(self.type & HolidayType.COMPENSATORY)

    def has_type(self, flags: HolidayType) -> bool:
        """Return True if all bits of ``flags`` are set on this holiday."""
        return (self.type & flags) == flags

    def with_type(self, additional_type: HolidayType) -> Holiday:
        """Return a copy with ``additional_type`` OR'd into the type."""
        return replace(self, type=self.type | additional_type)

    def compensatory(self, on: date) -> Holiday:
        """Return the compensatory variant of this holiday dated ``on``."""
        return Holiday(
            name=HolidayName.compensatory(self.name),
            date=on,
            type=self.type | HolidayType.COMPENSATORY,
        )

    def __str__(self) -> str:
        return f"{self.simple_date} {self.name}"


# =============================================================================
# Holiday List
# =============================================================================

@dataclass(frozen=True)
class HolidayList(Sequence[Holiday]):
    """
    Immutable ordered sequence of holidays.

    Duplicates (same name and date) may coexist; order is insertion order
    unless a SortByDateFilter has been applied.
    """
    holidays: tuple[Holiday, ...] = field(default_factory=tuple)

    def __init__(self, holidays: Iterable[Holiday] = ()) -> None:
        object.__setattr__(self, "holidays", tuple(holidays))

    @overload
    def __getitem__(self, index: int) -> Holiday: ...

    @overload
    def __getitem__(self, index: slice) -> HolidayList: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Holiday, HolidayList]:
        if isinstance(index, slice):
            return HolidayList(self.holidays[index])
        return self.holidays[index]

    def __len__(self) -> int:
        return len(self.holidays)

    def __iter__(self) -> Iterator[Holiday]:
        return iter(self.holidays)

    def __add__(self, other: Iterable[Holiday]) -> HolidayList:
        return HolidayList(self.holidays + tuple(other))

    def __repr__(self) -> str:
        return f"HolidayList({list(self.holidays)!r})"

    def dates(self) -> list[date]:
        """Dates of all entries, in list order."""
        return [h.date for h in self.holidays]

    def simple_dates(self) -> list[str]:
        """ISO date strings of all entries, in list order."""
        return [h.simple_date for h in self.holidays]

    def names(self) -> list[str]:
        """Names of all entries, in list order."""
        return [h.name for h in self.holidays]

    def contains_date(self, d: date) -> bool:
        return any(h.date == d for h in self.holidays)

    def contains_name(self, name: str) -> bool:
        return any(h.name == name for h in self.holidays)

    def by_name(self, name: str) -> list[Holiday]:
        return [h for h in self.holidays if h.name == name]


class HolidayListBuilder:
    """
    Mutable construction-time list.

    Providers append to a builder and hand out ``freeze()``'d lists; nothing
    downstream mutates a calculated result.
    """

    def __init__(self, holidays: Iterable[Holiday] = ()) -> None:
        self._holidays: list[Holiday] = list(holidays)

    def add(self, holiday: Holiday) -> HolidayListBuilder:
        self._holidays.append(holiday)
        return self

    def extend(self, holidays: Iterable[Holiday]) -> HolidayListBuilder:
        self._holidays.extend(holidays)
        return self

    def freeze(self) -> HolidayList:
        return HolidayList(self._holidays)

    def __len__(self) -> int:
        return len(self._holidays)

    def __iter__(self) -> Iterator[Holiday]:
        return iter(list(self._holidays))
