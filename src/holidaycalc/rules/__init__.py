"""
holidaycalc Rules

Reusable rule snippets injected into region providers:
- common: secular holidays (New Year, Labor Day, ...)
- christian: Easter-relative and fixed Christian feasts

Usage:
    from holidaycalc.rules import christian, common

    holidays.add(christian.good_friday(year, OFFICIAL_DAY_OFF))
"""
from __future__ import annotations

from . import christian, common

__all__ = ["christian", "common"]
