"""
iCalendar Formatter

Renders holidays as all-day VEVENTs (RFC 5545). Each holiday becomes:

    BEGIN:VEVENT
    UID:<name>-<yyyymmdd>@holidaycalc
    DTSTART;VALUE=DATE:<yyyymmdd>
    DTEND;VALUE=DATE:<yyyymmdd + 1 day>
    SUMMARY:<translated name>
    TRANSP:TRANSPARENT
    END:VEVENT

A holiday on the last representable date (9999-12-31) carries
"DURATION:P1D" in place of DTEND.

Every line, including the last one, ends with CRLF.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional

from ..models import Holiday
from .translator import NullTranslator, Translator

LINE_ENDING = "\r\n"
DEFAULT_PRODUCT_ID = "-//holidaycalc//Holiday Calculator//EN"

# Content lines longer than this many octets are folded
MAX_LINE_OCTETS = 75

ICAL_DATE_FORMAT = "%Y%m%d"


def escape_text(value: str) -> str:
    """Escape a TEXT property value."""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def fold_line(line: str) -> list[str]:
    """Split a content line into folded physical lines of at most 75 octets."""
    lines = []
    current = ""
    current_octets = 0
    limit = MAX_LINE_OCTETS
    for char in line:
        octets = len(char.encode("utf-8"))
        if current_octets + octets > limit:
            lines.append(current)
            # Continuation lines start with a space, which counts toward the limit
            current = " "
            current_octets = 1
        current += char
        current_octets += octets
    lines.append(current)
    return lines


class ICalendarFormatter:
    """Formats holidays and holiday lists as iCalendar text."""

    def __init__(self, translator: Optional[Translator] = None, product_id: str = DEFAULT_PRODUCT_ID):
        self.translator = translator if translator is not None else NullTranslator()
        self.product_id = product_id

    @staticmethod
    def _join(lines: Iterable[str]) -> str:
        physical = [part for line in lines for part in fold_line(line)]
        return "".join(part + LINE_ENDING for part in physical)

    def header(self) -> str:
        return self._join([
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            f"PRODID:{self.product_id}",
        ])

    def footer(self) -> str:
        return self._join(["END:VCALENDAR"])

    def format(self, holiday: Holiday) -> str:
        """One VEVENT block."""
        start = holiday.date.strftime(ICAL_DATE_FORMAT)
        if holiday.date == date.max:
            end_line = "DURATION:P1D"
        else:
            end = (holiday.date + timedelta(days=1)).strftime(ICAL_DATE_FORMAT)
            end_line = f"DTEND;VALUE=DATE:{end}"
        return self._join([
            "BEGIN:VEVENT",
            f"UID:{holiday.name}-{start}@holidaycalc",
            f"DTSTART;VALUE=DATE:{start}",
            end_line,
            f"SUMMARY:{escape_text(self.translator.translate(holiday.name))}",
            "TRANSP:TRANSPARENT",
            "END:VEVENT",
        ])

    def format_list(self, holidays: Iterable[Holiday]) -> str:
        return "".join(self.format(h) for h in holidays)

    def render(self, holidays: Iterable[Holiday]) -> str:
        """Complete calendar: header, events, footer."""
        return self.header() + self.format_list(holidays) + self.footer()
