"""Response schemas for the API."""

from pydantic import BaseModel
from typing import Optional


class HealthResponse(BaseModel):
    """Liveness probe response."""
    status: str
    timestamp: str
    version: str
    regions_loaded: int
    default_region: str


class RegionSummary(BaseModel):
    """Summary of a registered region."""
    id: str
    name: str
    parent: Optional[str] = None


class RegionDetail(RegionSummary):
    """Region with its direct sub-regions."""
    children: list[str] = []


class HolidayItem(BaseModel):
    """A single holiday."""
    name: str
    display_name: str
    date: str  # YYYY-MM-DD
    types: list[str]
    compensatory: bool = False


class HolidayListResponse(BaseModel):
    """Holidays of a region in a year."""
    region_id: str
    year: int
    count: int
    holidays: list[HolidayItem]


class IsHolidayResponse(BaseModel):
    """Whether a date is a holiday in a region."""
    region_id: str
    date: str
    is_holiday: bool
    holidays: list[HolidayItem] = []


class NoWorkDaysResponse(BaseModel):
    """No-work days and remaining work days within a span."""
    region_id: str
    first_day: str
    last_day: str
    total_days: int
    work_days: int
    no_work_days: list[HolidayItem]
