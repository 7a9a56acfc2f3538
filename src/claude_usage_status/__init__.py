"""claude-usage-status - Claude Code usage quotas as a single status line.

This package resolves the Claude Code OAuth token, fetches the 5-hour and
7-day usage windows and renders them as gradient progress bars.
"""

from claude_usage_status._version import __version__
from claude_usage_status.cli import create_parser, main, print_version, render_usage_line

__all__ = [
    "__version__",
    "create_parser",
    "main",
    "print_version",
    "render_usage_line",
]
