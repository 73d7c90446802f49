"""
holidaycalc Configuration

Settings read from the environment. Only registry construction and the HTTP
service consult these; calculation functions never touch the environment.

Environment variables:
    HOLIDAYCALC_LOG_LEVEL       Log level for the service logger (INFO)
    HOLIDAYCALC_PACK_PATH       Extra rule pack directories, os.pathsep separated
    HOLIDAYCALC_DEFAULT_REGION  Region used when a caller names none (DE)
    HOLIDAYCALC_DOCS_ENABLED    Serve OpenAPI docs from the service (true)
    HOLIDAYCALC_STRICT_PACKS    Abort on a bad pack file instead of skipping it (true)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""
    log_level: str = "INFO"
    pack_paths: tuple[str, ...] = ()
    default_region: str = "DE"
    docs_enabled: bool = True
    strict_packs: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        pack_path = env.get("HOLIDAYCALC_PACK_PATH", "")
        return cls(
            log_level=env.get("HOLIDAYCALC_LOG_LEVEL", "INFO").upper(),
            pack_paths=tuple(p for p in pack_path.split(os.pathsep) if p.strip()),
            default_region=env.get("HOLIDAYCALC_DEFAULT_REGION", "DE"),
            docs_enabled=_flag(env.get("HOLIDAYCALC_DOCS_ENABLED", "true")),
            strict_packs=_flag(env.get("HOLIDAYCALC_STRICT_PACKS", "true")),
        )
