"""Status line output formatter.

Produces the single line Claude Code shows under the prompt:

    5h ████░░░░░░ 45% │ 7d ███████░░░ 78% │ ⏱ 2h15m
"""

from __future__ import annotations

from datetime import datetime

from claude_usage_status.api.models import UsageSnapshot
from claude_usage_status.display.progress import (
    DEFAULT_BAR_WIDTH,
    format_percentage,
    make_progress_bar,
)
from claude_usage_status.utils.time import format_time_until_reset

SEPARATOR = " │ "
TIMER_ICON = "⏱"
STATUSLINE_PLACEHOLDER = "⚠️ Usage unavailable"


def format_window(label: str, utilization: float, width: int = DEFAULT_BAR_WIDTH) -> str:
    """Format one labeled window, e.g. '5h <bar> 45%'."""
    return f"{label} {make_progress_bar(utilization, width)} {format_percentage(utilization)}"


def format_status_line(
    snapshot: UsageSnapshot,
    now: datetime | None = None,
    width: int = DEFAULT_BAR_WIDTH,
) -> str:
    """Format a usage snapshot as one status line.

    The countdown shows the five-hour window, the one that resets sooner.

    Args:
        snapshot: Decoded usage data.
        now: Reference time for the countdown. Defaults to now (UTC).
        width: Width of each progress bar in cells.

    Returns:
        Status line string with ANSI colors.
    """
    parts = [
        format_window("5h", snapshot.five_hour.utilization, width),
        format_window("7d", snapshot.seven_day.utilization, width),
        f"{TIMER_ICON} {format_time_until_reset(snapshot.five_hour.resets_at, now)}",
    ]
    return SEPARATOR.join(parts)


__all__ = [
    "SEPARATOR",
    "TIMER_ICON",
    "STATUSLINE_PLACEHOLDER",
    "format_window",
    "format_status_line",
]
