"""
holidaycalc Rule Pack Schemas

Pydantic models for validating rule pack YAML/JSON files.

A rule pack declares one region: its id, display name, optional parent region
and a list of rules. Each rule has one of three kinds:
- fixed: month/day literal
- easter: signed day offset from Easter Sunday
- nth_weekday: nth (or last, n=-1) weekday of a month, Sunday=0

Schema versioning:
- schema_version field tracks breaking changes
- Loaders reject packs whose major version differs
"""
from __future__ import annotations

from datetime import date
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

RuleKindValue = Literal["fixed", "easter", "nth_weekday"]

HolidayTypeValue = Literal[
    "other", "religious", "official", "day_off",
    "half_day_off", "no_school", "partial_only", "compensatory",
]


# =============================================================================
# Rule Schema
# =============================================================================

class RuleSchema(BaseModel):
    """
    Schema for a single holiday rule.

    Which date fields are required depends on ``kind``.
    """
    name: str = Field(..., min_length=1, description="Holiday identifier (e.g. 'new_year')")
    kind: RuleKindValue = Field(..., description="How the date is computed")

    # fixed / nth_weekday
    month: Optional[int] = Field(None, ge=1, le=12, description="Month (1-12)")
    day: Optional[int] = Field(None, ge=1, le=31, description="Day of month (fixed)")

    # easter
    offset: Optional[int] = Field(None, ge=-52, le=60, description="Days from Easter Sunday")

    # nth_weekday
    weekday: Optional[int] = Field(None, ge=0, le=6, description="Day of week, Sunday=0")
    n: Optional[int] = Field(None, ge=-5, le=5, description="Occurrence (1=first, -1=last)")

    types: list[HolidayTypeValue] = Field(
        default_factory=lambda: ["other"],
        description="Holiday type flags",
    )
    since: Optional[int] = Field(None, description="First year the rule applies (inclusive)")
    until: Optional[int] = Field(None, description="Last year the rule applies (inclusive)")
    compensatory: bool = Field(False, description="Apply the compensatory-day rule")

    model_config = {
        "extra": "forbid",
    }

    @model_validator(mode="after")
    def validate_structure(self) -> "RuleSchema":
        """Validate date fields based on the rule kind."""
        if self.kind == "fixed":
            if self.month is None or self.day is None:
                raise ValueError(f"Fixed rule '{self.name}' requires 'month' and 'day'")
            # Leap year, so February 29 is accepted
            date(2000, self.month, self.day)
        elif self.kind == "easter":
            if self.offset is None:
                raise ValueError(f"Easter rule '{self.name}' requires 'offset'")
        elif self.kind == "nth_weekday":
            if self.month is None or self.weekday is None or self.n is None:
                raise ValueError(
                    f"Weekday rule '{self.name}' requires 'month', 'weekday' and 'n'"
                )
            if self.n == 0:
                raise ValueError(f"Weekday rule '{self.name}': 'n' must not be 0")

        if self.since is not None and self.until is not None and self.since > self.until:
            raise ValueError(f"Rule '{self.name}': 'since' is after 'until'")
        if not self.types:
            raise ValueError(f"Rule '{self.name}' requires at least one type")
        return self


# =============================================================================
# Rule Pack Schema (Top-Level)
# =============================================================================

class RulePackSchema(BaseModel):
    """Top-level schema for a rule pack YAML/JSON file."""
    schema_version: str = Field(SCHEMA_VERSION, description="Schema version for compatibility")
    region_id: str = Field(..., min_length=1, description="Region identifier (e.g. 'BE-VLG')")
    name: str = Field(..., min_length=1, description="Human-readable region name")
    parent: Optional[str] = Field(None, description="Parent region identifier")
    description: Optional[str] = None
    rules: list[RuleSchema] = Field(default_factory=list)

    model_config = {
        "extra": "forbid",
    }

    @field_validator("region_id", "parent")
    @classmethod
    def normalize_region_id(cls, v: Optional[str]) -> Optional[str]:
        return v.strip().upper() if v is not None else None

    @model_validator(mode="after")
    def validate_parent(self) -> "RulePackSchema":
        if self.parent == self.region_id:
            raise ValueError(f"Region '{self.region_id}' cannot be its own parent")
        return self


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_rule_pack(data: dict[str, Any]) -> RulePackSchema:
    """
    Validate a rule pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return RulePackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """True if the pack's major schema version matches ours."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    return pack_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
