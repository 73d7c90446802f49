"""
holidaycalc Rule Packs

Schema validation and loading for declarative region rule packs.

Rule packs are YAML or JSON files that define one region's holidays as
fixed-date, Easter-relative or nth-weekday rules, optionally on top of a
parent region.

Usage:
    from holidaycalc.packs import RulePackLoader

    loader = RulePackLoader()
    pack = loader.load_file("path/to/dk.yaml")
    registry.register(pack.to_provider(registry))

    # Load every pack in a directory
    packs = loader.load_directory("path/to/packs")
"""
from __future__ import annotations

from pathlib import Path

from .loader import (
    PackRule,
    RegisteredRegion,
    RulePack,
    RulePackLoader,
    validate_reference_integrity,
)
from .schema import (
    SCHEMA_VERSION,
    RulePackSchema,
    RuleSchema,
    check_schema_version,
    validate_rule_pack,
)

# Packs shipped with the package
BUNDLED_PACKS_DIR = Path(__file__).parent / "data"

__all__ = [
    # Version
    "SCHEMA_VERSION",
    "BUNDLED_PACKS_DIR",
    # Loader
    "RulePackLoader",
    "RulePack",
    "PackRule",
    "RegisteredRegion",
    # Validation
    "validate_rule_pack",
    "validate_reference_integrity",
    "check_schema_version",
    # Schemas
    "RulePackSchema",
    "RuleSchema",
]
