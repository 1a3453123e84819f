"""Lenient field coercion for records returned by the backend."""

from __future__ import annotations

import datetime as dt
import math
from typing import Any, Optional


def coerce_count(value: Any) -> int:
    """Return ``value`` as an integer, treating missing or non-numeric input as 0."""

    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if math.isnan(number) or math.isinf(number):
        return 0
    return int(number)


def coerce_date(value: Any) -> Optional[dt.date]:
    """Parse a calendar date from an ISO string, ``date`` or ``datetime``."""

    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str) and value:
        # Backends sometimes send full timestamps; only the day matters here.
        try:
            return dt.date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None
