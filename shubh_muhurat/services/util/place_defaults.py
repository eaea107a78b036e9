"""Helpers for picking the display time zone of a selected city."""

import os
from typing import Optional

from timezonefinder import TimezoneFinder
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

_TF = TimezoneFinder()

FALLBACK_TZ = "Asia/Kolkata"


def checked_tz(name: Optional[str]) -> str:
    """Return ``name`` when it is a known zone, else the fallback zone."""

    if not name:
        return FALLBACK_TZ
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return FALLBACK_TZ
    return name


DEF_TZ = checked_tz(os.getenv("DEFAULT_PLACE_TZ"))


def infer_tz(lat: float, lon: float) -> Optional[str]:
    """Infer timezone name for a coordinate pair."""

    try:
        return _TF.timezone_at(lng=lon, lat=lat)
    except ValueError:
        return None


def display_tz(lat: Optional[float], lon: Optional[float]) -> str:
    """Return the zone used for wall-clock times, defaulting when unknown."""

    if lat is None or lon is None:
        return DEF_TZ
    return infer_tz(lat, lon) or DEF_TZ
