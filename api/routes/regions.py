"""Region and holiday endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Response

from api.schemas.responses import (
    HolidayItem,
    HolidayListResponse,
    IsHolidayResponse,
    NoWorkDaysResponse,
    RegionDetail,
    RegionSummary,
)
from holidaycalc.filters import IncludeTimespanFilter
from holidaycalc.formatters import DictTranslator, NullTranslator, Translator
from holidaycalc.helper import HolidayHelper
from holidaycalc.models import Holiday, HolidayType, Weekday
from holidaycalc.providers import WeekdayProvider

router = APIRouter(prefix="/regions", tags=["Regions"])

# Shared helper instance (set by main.py)
helper: HolidayHelper = None


def set_helper(h: HolidayHelper):
    global helper
    helper = h


def _translator(lang: Optional[str]) -> Translator:
    if not lang:
        return NullTranslator()
    try:
        return DictTranslator.for_language(lang)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


def _holiday_item(holiday: Holiday, translator: Translator) -> HolidayItem:
    return HolidayItem(
        name=holiday.name,
        display_name=translator.translate(holiday.name),
        date=holiday.simple_date,
        types=holiday.type.flag_names(),
        compensatory=holiday.is_compensatory,
    )


def _region_summary(region_id: str) -> RegionSummary:
    provider = helper.calculator.registry.resolve(region_id)
    return RegionSummary(
        id=getattr(provider, "region_id", region_id),
        name=getattr(provider, "name", region_id),
        parent=getattr(provider, "parent_id", None),
    )


@router.get("", response_model=list[RegionSummary])
async def list_regions(parent: Optional[str] = None):
    """
    List all registered regions.

    Optionally filter by parent region id, e.g. `?parent=DE` for the German states.
    """
    registry = helper.calculator.registry
    if parent:
        region_ids = registry.children_of(parent)
    else:
        region_ids = registry.region_ids()
    return [_region_summary(region_id) for region_id in region_ids]


@router.get("/{region_id}", response_model=RegionDetail)
async def get_region(region_id: str):
    """Get a region and its direct sub-regions."""
    summary = _region_summary(region_id)
    return RegionDetail(
        **summary.model_dump(),
        children=helper.calculator.registry.children_of(region_id),
    )


@router.get("/{region_id}/holidays", response_model=HolidayListResponse)
async def get_holidays(
    region_id: str,
    year: int = Query(..., description="Calendar year"),
    month: Optional[int] = Query(None, ge=1, le=12, description="Restrict to one month"),
    day_off_only: bool = Query(False, description="Only holidays that are a day off"),
    lang: Optional[str] = Query(None, description="Translate names (e.g. 'en', 'de')"),
):
    """Holidays of a region in a year, sorted by date."""
    translator = _translator(lang)
    if month is not None:
        holidays = helper.get_holidays_for_month(year, month, region_id)
    else:
        holidays = helper.calculator.calculate_holidays_for_year(year, region_id)
    holidays = helper.merge_holiday_lists([holidays])
    if day_off_only:
        holidays = [h for h in holidays if h.has_type(HolidayType.DAY_OFF)]

    return HolidayListResponse(
        region_id=region_id,
        year=year,
        count=len(holidays),
        holidays=[_holiday_item(h, translator) for h in holidays],
    )


@router.get("/{region_id}/holidays.ics")
async def get_holidays_icalendar(
    region_id: str,
    year: int = Query(..., description="Calendar year"),
    lang: Optional[str] = Query(None, description="Translate names (e.g. 'en', 'de')"),
):
    """Holidays of a region in a year as an iCalendar document."""
    translator = _translator(lang)
    holidays = helper.merge_holiday_lists([
        helper.calculator.calculate_holidays_for_year(year, region_id)
    ])
    content = helper.get_holiday_list_in_icalendar_format(holidays, translator)
    return Response(
        content=content,
        media_type="text/calendar",
        headers={"Content-Disposition": f'attachment; filename="{region_id}-{year}.ics"'},
    )


@router.get("/{region_id}/is-holiday", response_model=IsHolidayResponse)
async def is_holiday(
    region_id: str,
    date: date = Query(..., description="Date to check (YYYY-MM-DD)"),
    lang: Optional[str] = Query(None, description="Translate names (e.g. 'en', 'de')"),
):
    """Whether a date is a holiday in a region, with the matching holidays."""
    translator = _translator(lang)
    is_holiday = helper.is_day_a_holiday(date, region_id)
    holidays = IncludeTimespanFilter(date, date)(
        helper.calculator.calculate_holidays_for_year(date.year, region_id)
    )
    return IsHolidayResponse(
        region_id=region_id,
        date=date.isoformat(),
        is_holiday=is_holiday,
        holidays=[_holiday_item(h, translator) for h in holidays],
    )


@router.get("/{region_id}/no-work-days", response_model=NoWorkDaysResponse)
async def get_no_work_days(
    region_id: str,
    first_day: date = Query(..., description="First day (inclusive)"),
    last_day: date = Query(..., description="Last day (inclusive)"),
    weekday: Optional[list[int]] = Query(
        None, description="No-work weekdays, Sunday=0 (default: Sunday)"
    ),
    lang: Optional[str] = Query(None, description="Translate names (e.g. 'en', 'de')"),
):
    """No-work days (day-off holidays and no-work weekdays) within a span."""
    translator = _translator(lang)
    providers = None
    if weekday:
        invalid = [w for w in weekday if not 0 <= w <= 6]
        if invalid:
            raise HTTPException(status_code=422, detail=f"Invalid weekday(s) {invalid}; use 0 (Sunday) to 6")
        providers = [WeekdayProvider(Weekday(w), HolidayType.DAY_OFF) for w in sorted(set(weekday))]

    no_work_days = helper.get_no_work_days_for_timespan(first_day, last_day, region_id, providers)
    total_days = (last_day - first_day).days + 1
    return NoWorkDaysResponse(
        region_id=region_id,
        first_day=first_day.isoformat(),
        last_day=last_day.isoformat(),
        total_days=total_days,
        work_days=total_days - len(no_work_days),
        no_work_days=[_holiday_item(h, translator) for h in no_work_days],
    )
