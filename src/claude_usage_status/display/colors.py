"""Terminal color handling.

ANSI 256-color codes for the status line. Claude Code renders the status
line from a pipe, so color is on by default and only disabled on request.
"""

import re


class Colors:
    """ANSI color codes for status line output."""

    RESET = "\033[0m"
    # Gradient from green to red
    GREEN = "\033[38;5;46m"
    LIME = "\033[38;5;118m"
    YELLOW = "\033[38;5;226m"
    ORANGE = "\033[38;5;208m"
    RED = "\033[38;5;196m"
    # Empty bar cells
    DIM_GRAY = "\033[38;5;240m"


ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI color sequences from text.

    Args:
        text: String possibly containing escape codes.

    Returns:
        Plain text.
    """
    return ANSI_ESCAPE.sub("", text)


__all__ = ["Colors", "ANSI_ESCAPE", "strip_ansi"]
