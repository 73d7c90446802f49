"""
holidaycalc Exception Hierarchy

Domain-specific exceptions for holiday calculation.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: HC_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class HolidayCalcError(Exception):
    """
    Base exception for all holidaycalc errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (HC_*)
        details: Additional context about the error
        region_id: Associated region identifier if applicable
    """
    message: str
    code: str = "HC_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    region_id: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.region_id:
            parts.append(f"(region: {self.region_id})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.region_id:
            result["region_id"] = self.region_id
        return result


# =============================================================================
# Calculation Errors
# =============================================================================

@dataclass
class RegionNotFoundError(HolidayCalcError):
    """No provider is registered for the requested region identifier."""
    code: str = "HC_REGION_NOT_FOUND"


@dataclass
class InvalidYearError(HolidayCalcError):
    """Year is outside the supported Gregorian computus range."""
    code: str = "HC_INVALID_YEAR"


@dataclass
class InvalidDateRangeError(HolidayCalcError):
    """First day of a timespan lies after its last day."""
    code: str = "HC_INVALID_DATE_RANGE"


# =============================================================================
# Rule Pack Errors
# =============================================================================

@dataclass
class RulePackLoadError(HolidayCalcError):
    """Failed to read or parse a rule pack file."""
    code: str = "HC_RULE_PACK_LOAD_ERROR"


@dataclass
class RulePackValidationError(HolidayCalcError):
    """Rule pack schema or reference validation failed."""
    code: str = "HC_RULE_PACK_VALIDATION_ERROR"


@dataclass
class RulePackVersionMismatch(HolidayCalcError):
    """Rule pack schema version is not supported by this loader."""
    code: str = "HC_RULE_PACK_VERSION_MISMATCH"
