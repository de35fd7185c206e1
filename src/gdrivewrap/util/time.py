from __future__ import annotations

import re
from datetime import datetime, timezone, tzinfo
from typing import Optional

LISTING_TIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"

_FRACTION_RE = re.compile(r"\.(\d+)")


def parse_listing_time(value: str, tz: Optional[tzinfo] = None) -> datetime:
    """
    Parse a `YYYY-MM-DD HH:MM:SS` timestamp printed by gdrive.

    gdrive prints these in the host's local time. The naive value is read
    in `tz` when given, otherwise in the local zone, and returned as a
    tz-aware UTC datetime. The format is purely numeric, so the result does
    not depend on the process locale.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("timestamp value must be a non-empty string")

    dt = datetime.strptime(value.strip(), LISTING_TIME_FORMAT)
    dt = dt.replace(tzinfo=tz) if tz is not None else dt.astimezone()
    return dt.astimezone(timezone.utc)


def parse_rfc3339(value: str) -> datetime:
    """
    Parse RFC3339 timestamp string into tz-aware UTC datetime.

    Accepts strings like:
      - 2025-01-01T12:34:56Z
      - 2025-01-01T12:34:56.123Z
      - 2018-11-20T10:00:00.123456789+01:00 (Go writes nanoseconds)
    """
    if not isinstance(value, str) or not value:
        raise ValueError("RFC3339 value must be a non-empty string")

    s = value.strip()
    # Python's fromisoformat doesn't accept 'Z' in 3.9/3.10, so normalize.
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    # datetime only keeps microseconds.
    s = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), s, count=1)

    dt = datetime.fromisoformat(s)  # raises ValueError if invalid
    dt = normalize_dt(dt)
    return dt.astimezone(timezone.utc)


def normalize_dt(dt: datetime) -> datetime:
    """Ensure datetime is tz-aware. Raises if naive."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt


def to_naive_utc(dt: datetime) -> datetime:
    """Convert a tz-aware datetime to naive UTC (what google-auth expects)."""
    return normalize_dt(dt).astimezone(timezone.utc).replace(tzinfo=None)
