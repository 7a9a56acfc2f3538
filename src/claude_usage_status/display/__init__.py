"""Display components for status line output.

Modules:
    colors: ANSI color palette
    progress: Gradient progress bar and label colors
    statusline: Single-line usage formatter
"""

from claude_usage_status.display.colors import Colors, strip_ansi
from claude_usage_status.display.progress import (
    DEFAULT_BAR_WIDTH,
    clamp_percentage,
    format_percentage,
    get_gradient_color,
    get_label_color,
    make_progress_bar,
)
from claude_usage_status.display.statusline import (
    STATUSLINE_PLACEHOLDER,
    format_status_line,
    format_window,
)

__all__ = [
    "Colors",
    "strip_ansi",
    "DEFAULT_BAR_WIDTH",
    "clamp_percentage",
    "format_percentage",
    "get_gradient_color",
    "get_label_color",
    "make_progress_bar",
    "STATUSLINE_PLACEHOLDER",
    "format_status_line",
    "format_window",
]
