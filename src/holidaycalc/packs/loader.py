"""
holidaycalc Rule Pack Loader

Loads and validates rule packs from YAML or JSON files.

Converts Pydantic schema models to RulePack domain objects, which build
RegionProviders for the registry.
"""
from __future__ import annotations

import calendar
import json
import logging
from dataclasses import dataclass, field
from datetime import date
from functools import reduce
from operator import or_
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Union

import yaml
from pydantic import ValidationError

from .. import dates
from ..exceptions import (
    HolidayCalcError,
    RulePackLoadError,
    RulePackValidationError,
    RulePackVersionMismatch,
)
from ..models import NO_FLAGS, Holiday, HolidayList, HolidayListBuilder, HolidayType
from ..providers import RegionProvider, add_compensatory_day
from .schema import (
    SCHEMA_VERSION,
    RulePackSchema,
    RuleSchema,
    check_schema_version,
    validate_rule_pack,
)

if TYPE_CHECKING:
    from ..registry import RegionRegistry

logger = logging.getLogger(__name__)

PACK_SUFFIXES = {".yaml", ".yml", ".json"}


# =============================================================================
# Domain Objects
# =============================================================================

@dataclass(frozen=True)
class PackRule:
    """A validated declarative rule."""
    name: str
    kind: str
    type: HolidayType
    month: Optional[int] = None
    day: Optional[int] = None
    offset: Optional[int] = None
    weekday: Optional[int] = None
    n: Optional[int] = None
    since: Optional[int] = None
    until: Optional[int] = None
    compensatory: bool = False

    def applies_to(self, year: int) -> bool:
        if self.since is not None and year < self.since:
            return False
        if self.until is not None and year > self.until:
            return False
        return True

    def overlaps(self, other: PackRule) -> bool:
        """True if both rules can apply in the same year."""
        low = max(self.since or dates.MIN_YEAR, other.since or dates.MIN_YEAR)
        high = min(self.until or dates.MAX_YEAR, other.until or dates.MAX_YEAR)
        return low <= high

    def holiday_for_year(self, year: int) -> Optional[Holiday]:
        """The holiday produced in ``year``, or None when the rule does not apply."""
        if not self.applies_to(year):
            return None
        if self.kind == "fixed":
            if self.month == 2 and self.day == 29 and not calendar.isleap(year):
                return None
            d = date(year, self.month, self.day)
        elif self.kind == "easter":
            d = dates.easter_offset(year, self.offset)
        else:
            d = dates.nth_weekday_of_month(year, self.month, self.weekday, self.n)
        if d is None or d.year != year:
            return None
        return Holiday(self.name, d, self.type)


@dataclass(frozen=True)
class RegisteredRegion:
    """
    Provider placeholder resolved through a registry at calculation time.

    Lets a pack name a parent that is registered later (or by another pack).
    """
    region_id: str
    registry: RegionRegistry = field(repr=False, compare=False)

    @property
    def parent(self) -> Any:
        return getattr(self.registry.resolve(self.region_id), "parent", None)

    def calculate_holidays_for_year(self, year: int) -> HolidayList:
        return self.registry.resolve(self.region_id).calculate_holidays_for_year(year)


@dataclass(frozen=True)
class RulePack:
    """A loaded rule pack for one region."""
    region_id: str
    name: str
    rules: tuple[PackRule, ...] = ()
    parent: Optional[str] = None
    description: Optional[str] = None
    source: str = ""
    schema_version: str = SCHEMA_VERSION

    def apply(self, year: int, holidays: HolidayListBuilder) -> None:
        """Rule function: append this pack's holidays for ``year``."""
        for rule in self.rules:
            holiday = rule.holiday_for_year(year)
            if holiday is None:
                continue
            holidays.add(holiday)
            if rule.compensatory:
                add_compensatory_day(holidays, holiday, year)

    def to_provider(self, registry: Optional[RegionRegistry] = None) -> RegionProvider:
        """
        Build a RegionProvider for this pack.

        Raises:
            ValueError: If the pack has a parent but no registry is given
        """
        parent = None
        if self.parent:
            if registry is None:
                raise ValueError(f"Pack '{self.region_id}' has a parent; a registry is required")
            parent = RegisteredRegion(self.parent, registry)
        return RegionProvider(
            region_id=self.region_id,
            name=self.name,
            rules=self.apply,
            parent=parent,
        )


# =============================================================================
# Reference Integrity Validation
# =============================================================================

def validate_reference_integrity(pack: RulePack, path: str = "") -> None:
    """
    Validate rules within a pack are consistent.

    Catches rules sharing a name and kind that can apply in the same year.

    Raises:
        ValueError: If reference integrity errors are found
    """
    errors = []
    for i, rule in enumerate(pack.rules):
        for other in pack.rules[:i]:
            if rule.name == other.name and rule.kind == other.kind and rule.overlaps(other):
                errors.append(f"Duplicate rule '{rule.name}' ({rule.kind})")
                break

    if errors:
        path_str = f" in {path}" if path else ""
        raise ValueError(
            f"Reference integrity errors{path_str}:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_types(values: list[str]) -> HolidayType:
    return reduce(or_, (HolidayType[v.upper()] for v in values), NO_FLAGS)


def _convert_rule(schema: RuleSchema) -> PackRule:
    """Convert RuleSchema to PackRule."""
    return PackRule(
        name=schema.name,
        kind=schema.kind,
        type=_convert_types(schema.types),
        month=schema.month,
        day=schema.day,
        offset=schema.offset,
        weekday=schema.weekday,
        n=schema.n,
        since=schema.since,
        until=schema.until,
        compensatory=schema.compensatory,
    )


def _convert_rule_pack(schema: RulePackSchema, source: str) -> RulePack:
    """Convert RulePackSchema to RulePack."""
    return RulePack(
        region_id=schema.region_id,
        name=schema.name,
        rules=tuple(_convert_rule(r) for r in schema.rules),
        parent=schema.parent,
        description=schema.description,
        source=source,
        schema_version=schema.schema_version,
    )


# =============================================================================
# Rule Pack Loader
# =============================================================================

class RulePackLoader:
    """
    Loads rule packs from YAML or JSON files.

    Usage:
        loader = RulePackLoader()
        pack = loader.load_file("path/to/dk.yaml")
        registry.register(pack.to_provider(registry))
    """

    def __init__(self, strict: bool = True, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict: If True, a bad file aborts ``load_directory``; otherwise it
                is logged and skipped
            strict_version: If True, reject packs with incompatible schema versions
        """
        self.strict = strict
        self.strict_version = strict_version
        self._packs: dict[str, RulePack] = {}

    def load_file(self, path: Union[str, Path]) -> RulePack:
        """
        Load a rule pack from a file.

        Raises:
            RulePackLoadError: If the file cannot be read or parsed
            RulePackValidationError: If validation fails
            RulePackVersionMismatch: If the schema version is incompatible
        """
        path = Path(path)
        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise RulePackLoadError(
                message=f"Failed to load rule pack: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e
        return self.load_dict(data, source=str(path))

    def load_string(self, content: str, format: str = "yaml") -> RulePack:
        """Load a rule pack from a YAML or JSON string."""
        try:
            if format.lower() == "json":
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise RulePackLoadError(
                message=f"Failed to parse rule pack: {e}",
                details={"format": format, "error": str(e)},
            ) from e
        return self.load_dict(data, source="<string>")

    def load_dict(self, data: Any, source: str = "<dict>") -> RulePack:
        """
        Validate and convert already-parsed pack data.

        Raises:
            RulePackValidationError: If validation fails
            RulePackVersionMismatch: If the schema version is incompatible
        """
        if not isinstance(data, dict):
            raise RulePackValidationError(
                message="Rule pack must be a mapping",
                details={"path": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise RulePackVersionMismatch(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                    "path": source,
                },
            )

        try:
            schema = validate_rule_pack(data)
        except ValidationError as e:
            raise RulePackValidationError(
                message=f"Rule pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False, include_context=False), "path": source},
            ) from e

        pack = _convert_rule_pack(schema, source)

        try:
            validate_reference_integrity(pack, source)
        except ValueError as e:
            raise RulePackValidationError(
                message="Reference integrity validation failed",
                details={"errors": str(e), "path": source},
                region_id=pack.region_id,
            ) from e

        logger.debug("Loaded rule pack %s from %s (%d rules)", pack.region_id, source, len(pack.rules))
        self._packs[pack.region_id] = pack
        return pack

    def load_directory(self, directory: Union[str, Path]) -> list[RulePack]:
        """
        Load every *.yaml, *.yml and *.json pack in a directory, sorted by name.

        In non-strict mode, files that fail to load are logged and skipped.
        """
        directory = Path(directory)
        if not directory.is_dir():
            if self.strict:
                raise RulePackLoadError(
                    message=f"Rule pack directory not found: {directory}",
                    details={"path": str(directory)},
                )
            logger.warning("Skipping missing rule pack directory %s", directory)
            return []

        packs = []
        for path in sorted(directory.iterdir()):
            if path.suffix.lower() not in PACK_SUFFIXES:
                continue
            try:
                packs.append(self.load_file(path))
            except HolidayCalcError as e:
                if self.strict:
                    raise
                logger.warning("Skipping rule pack %s: %s", path, e)
        return packs

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def get_pack(self, region_id: str) -> Optional[RulePack]:
        """Get a loaded pack by region id."""
        return self._packs.get(region_id.strip().upper())

    def list_packs(self) -> list[str]:
        """Region ids of all loaded packs."""
        return list(self._packs.keys())
