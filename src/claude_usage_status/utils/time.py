"""Time parsing and countdown formatting.

Reset timestamps come from the API as RFC 3339 strings. A timestamp that
cannot be parsed degrades to "unknown" instead of failing the status line.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

_RFC3339 = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?P<offset>[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def parse_reset_time(iso_str: str) -> datetime:
    """Parse an RFC 3339 timestamp string to datetime.

    Accepts only the RFC 3339 date-time form: a Z or numeric UTC offset is
    required and fractional seconds of any precision are dropped.

    Args:
        iso_str: Timestamp string (e.g., "2026-01-09T15:00:00Z").

    Returns:
        Timezone-aware datetime object.

    Raises:
        ValueError: If the string is not an RFC 3339 timestamp.
    """
    match = _RFC3339.fullmatch(iso_str)
    if match is None:
        raise ValueError(f"not an RFC 3339 timestamp: {iso_str!r}")

    offset = match.group("offset")
    if offset in ("Z", "z"):
        offset = "+00:00"
    # Sub-second precision never affects a minute countdown
    return datetime.fromisoformat(f"{iso_str[:10]}T{iso_str[11:19]}{offset}")


def format_duration(delta: timedelta) -> str:
    """Format a duration compactly (e.g., '2h15m').

    Hours and minutes are truncated, never rounded.

    Args:
        delta: Time remaining.

    Returns:
        '2h15m', '3h', '45m', or 'now' for past and sub-minute durations.
    """
    total_seconds = int(delta.total_seconds())
    if total_seconds < 0:
        return "now"

    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60

    if hours > 0 and minutes > 0:
        return f"{hours}h{minutes}m"
    elif hours > 0:
        return f"{hours}h"
    elif minutes > 0:
        return f"{minutes}m"
    return "now"


def format_time_until_reset(reset_at: str, now: datetime | None = None) -> str:
    """Format the time left until a reset timestamp.

    Args:
        reset_at: RFC 3339 timestamp string.
        now: Reference time. Defaults to the current UTC time; a naive
            value is taken as UTC.

    Returns:
        Compact duration, 'now' if already reset, or 'unknown' if unparseable.
    """
    try:
        reset_dt = parse_reset_time(reset_at)
    except (ValueError, TypeError, AttributeError):
        return "unknown"

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return format_duration(reset_dt - now)


__all__ = ["parse_reset_time", "format_duration", "format_time_until_reset"]
