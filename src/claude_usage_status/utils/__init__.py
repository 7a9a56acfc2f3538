"""Utility functions.

Modules:
    time: Reset timestamp parsing and countdown formatting
"""

from claude_usage_status.utils.time import (
    format_duration,
    format_time_until_reset,
    parse_reset_time,
)

__all__ = [
    "parse_reset_time",
    "format_duration",
    "format_time_until_reset",
]
