"""RFC 3339 timestamp parsing and the [HH:MM:SS.mmm] clock format."""

import re
from datetime import datetime, timedelta, timezone

RFC3339_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))",
    re.ASCII,
)


def _offset(sign: str | None, hours: str | None, minutes: str | None) -> timezone | None:
    if sign is None:
        return timezone.utc
    h, m = int(hours), int(minutes)
    if h > 23 or m > 59:
        return None
    delta = timedelta(hours=h, minutes=m)
    return timezone(-delta if sign == "-" else delta)


def parse_rfc3339(value) -> datetime | None:
    """Parse an RFC 3339 timestamp string. Returns None for anything else.

    The result keeps the offset written in the string; fractional seconds
    beyond microsecond precision are truncated.
    """
    if not isinstance(value, str):
        return None
    match = RFC3339_PATTERN.fullmatch(value)
    if not match:
        return None

    year, month, day, hour, minute, second, fraction, _, sign, off_h, off_m = match.groups()
    tz = _offset(sign, off_h, off_m)
    if tz is None:
        return None

    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second),
            microsecond, tzinfo=tz,
        )
    except ValueError:
        return None


def format_clock(dt: datetime) -> str:
    """Return ``[HH:MM:SS.mmm]`` in the timestamp's own timezone."""
    return f"[{dt:%H:%M:%S}.{dt.microsecond // 1000:03d}]"
