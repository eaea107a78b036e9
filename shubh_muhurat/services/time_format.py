"""Wall-clock formatting of remote timestamps."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from zoneinfo import ZoneInfo

# 12-hour clock for English, 24-hour for Gujarati.
CLOCK_FORMATS = {
    "en": "%I:%M %p",
    "gu": "%H:%M",
}


def parse_ts(value: str, tz: str) -> datetime:
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=ZoneInfo(tz))
    return dt.astimezone(ZoneInfo(tz))


def format_clock(value: Optional[str], lang: str, tz: str) -> str:
    """Format an ISO timestamp as ``HH:MM`` local time in ``tz``.

    Missing values render empty; values that do not parse are shown as given.
    """

    if not value or not value.strip():
        return ""
    try:
        local = parse_ts(value, tz)
    except ValueError:
        return value.strip()
    fmt = CLOCK_FORMATS.get(lang, CLOCK_FORMATS["en"])
    return local.strftime(fmt)
