"""Answer value formatting: en-GB dates, footer timestamps, glyph cleanup."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo

# Helvetica (WinAnsi) lacks glyphs for a handful of characters that form
# answers and pasted text commonly carry.
_UNICODE_REPLACEMENTS: dict[str, str] = {
    "\u2011": "-",       # non-breaking hyphen
    "\u2010": "-",       # hyphen
    "\u2012": "-",       # figure dash
    "\u2015": "-",       # horizontal bar
    "\u202f": " ",       # narrow no-break space
    "\u2009": " ",       # thin space
    "\u200a": " ",       # hair space
    "\u200b": "",        # zero-width space
    "\u2192": "->",      # rightwards arrow
}


def sanitize_text(text: str) -> str:
    for char, replacement in _UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text


def parse_datetime(value: Any) -> datetime:
    """Parse an ISO-8601 string (``Z`` suffix allowed) or pass a datetime through.

    Raises ``ValueError`` for anything else.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"not a date: {value!r}")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _localise(moment: datetime, timezone: str) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(ZoneInfo(timezone))


def format_date(value: Any, timezone: str) -> str:
    """``DD/MM/YYYY`` in *timezone* (naive values are shown as-is)."""
    return _localise(parse_datetime(value), timezone).strftime("%d/%m/%Y")


def format_timestamp(value: Any, timezone: str) -> str:
    """``DD/MM/YYYY, h:mm am`` (12-hour clock), as shown in the page footer."""
    moment = _localise(parse_datetime(value), timezone)
    hour = moment.hour % 12 or 12
    meridiem = "am" if moment.hour < 12 else "pm"
    return f"{moment:%d/%m/%Y}, {hour}:{moment:%M} {meridiem}"


def display_value(value: Any) -> str:
    """Render a raw answer value as text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "\n".join(display_value(v) for v in value)
    return str(value)
