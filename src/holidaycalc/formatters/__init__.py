"""
holidaycalc Formatters

Render holiday lists as text, translating holiday identifiers on the way.

Usage:
    from holidaycalc.formatters import DictTranslator, ICalendarFormatter

    formatter = ICalendarFormatter(DictTranslator.for_language("de"))
    text = formatter.render(holidays)
"""
from __future__ import annotations

from .icalendar import (
    DEFAULT_PRODUCT_ID,
    LINE_ENDING,
    ICalendarFormatter,
    escape_text,
    fold_line,
)
from .translator import (
    TRANSLATIONS_DIR,
    DictTranslator,
    NullTranslator,
    Translator,
    available_languages,
)

__all__ = [
    # iCalendar
    "ICalendarFormatter",
    "LINE_ENDING",
    "DEFAULT_PRODUCT_ID",
    "escape_text",
    "fold_line",
    # Translators
    "Translator",
    "NullTranslator",
    "DictTranslator",
    "TRANSLATIONS_DIR",
    "available_languages",
]
