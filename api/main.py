"""
holidaycalc API

REST API for holiday calculation.

Endpoints:
    GET /health                                  - Liveness probe
    GET /holidays?year=                          - Holidays of the default region
    GET /regions                                 - Registered regions
    GET /regions/{id}                            - Region with sub-regions
    GET /regions/{id}/holidays?year=             - Holidays as JSON
    GET /regions/{id}/holidays.ics?year=&lang=   - Holidays as iCalendar
    GET /regions/{id}/is-holiday?date=           - Single-day check
    GET /regions/{id}/no-work-days?first_day=&last_day=
"""

import json
import logging
import sys
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

# Add src directory to path for holidaycalc imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from holidaycalc import __version__
from holidaycalc.calculator import HolidayCalculator
from holidaycalc.config import Settings
from holidaycalc.exceptions import (
    HolidayCalcError,
    InvalidDateRangeError,
    InvalidYearError,
    RegionNotFoundError,
)
from holidaycalc.helper import HolidayHelper
from holidaycalc.registry import default_registry

from api.routes import regions
from api.schemas.responses import HealthResponse, HolidayListResponse


# =============================================================================
# Configuration
# =============================================================================

settings = Settings.from_env()


# =============================================================================
# Logging
# =============================================================================

class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    EXTRA_FIELDS = ("region_id", "year", "duration_ms", "method", "path", "status_code", "code")

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Add extra fields if present
        for name in self.EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        return json.dumps(log_entry)


logger = logging.getLogger("holidaycalc")
logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)


# =============================================================================
# Engine
# =============================================================================

registry = default_registry(settings)
helper = HolidayHelper(HolidayCalculator(registry))
regions.set_helper(helper)

# Domain errors and their HTTP status
ERROR_STATUS = {
    RegionNotFoundError: 404,
    InvalidYearError: 422,
    InvalidDateRangeError: 422,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("holidaycalc API v%s starting", __version__)
    logger.info("Regions loaded: %d", len(registry))
    logger.info("Default region: %s", settings.default_region)
    logger.info("Docs enabled: %s", settings.docs_enabled)
    yield
    logger.info("holidaycalc API shutting down")


app = FastAPI(
    title="holidaycalc",
    description="Public holiday calculation for countries, states and cantons.",
    version=__version__,
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
    lifespan=lifespan,
)

app.include_router(regions.router)


# =============================================================================
# Middleware and Error Handling
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its duration."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - start) * 1000, 2)
    logger.info(
        "%s %s %d",
        request.method,
        request.url.path,
        response.status_code,
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


@app.exception_handler(HolidayCalcError)
async def holidaycalc_error_handler(request: Request, exc: HolidayCalcError):
    """Map domain errors to HTTP responses with the error's own body."""
    status_code = next(
        (status for error_type, status in ERROR_STATUS.items() if isinstance(exc, error_type)),
        500,
    )
    logger.warning(
        "%s", exc,
        extra={"code": exc.code, "region_id": exc.region_id, "path": request.url.path},
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


# =============================================================================
# Health Endpoints
# =============================================================================

@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Liveness probe."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=__version__,
        regions_loaded=len(registry),
        default_region=settings.default_region,
    )


# =============================================================================
# Default Region Endpoints
# =============================================================================

@app.get("/holidays", response_model=HolidayListResponse, tags=["Regions"])
async def get_default_region_holidays(
    year: int = Query(..., description="Calendar year"),
    month: Optional[int] = Query(None, ge=1, le=12, description="Restrict to one month"),
    day_off_only: bool = Query(False, description="Only holidays that are a day off"),
    lang: Optional[str] = Query(None, description="Translate names (e.g. 'en', 'de')"),
):
    """Holidays of the configured default region (HOLIDAYCALC_DEFAULT_REGION)."""
    return await regions.get_holidays(
        settings.default_region, year=year, month=month, day_off_only=day_off_only, lang=lang
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
