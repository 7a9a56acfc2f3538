"""Progress bar rendering and percentage coloring.

Filled cells are colored by their position in the bar rather than by the
overall percentage, so a nearly full bar shows the whole green-to-red
spectrum along its length.
"""

from claude_usage_status.display.colors import Colors

DEFAULT_BAR_WIDTH = 10
FILLED_CHAR = "█"
EMPTY_CHAR = "░"


def clamp_percentage(percentage: float) -> float:
    """Saturate a percentage to the 0-100 range."""
    return min(max(percentage, 0.0), 100.0)


def get_gradient_color(position: float) -> str:
    """Get the color of a bar cell from its relative position.

    Args:
        position: Cell index divided by bar width (0.0-1.0).

    Returns:
        ANSI color code string.
    """
    if position < 0.5:
        return Colors.GREEN
    elif position < 0.7:
        return Colors.LIME
    elif position < 0.85:
        return Colors.YELLOW
    elif position < 0.95:
        return Colors.ORANGE
    return Colors.RED


def make_progress_bar(percentage: float, width: int = DEFAULT_BAR_WIDTH) -> str:
    """Create a gradient progress bar with block characters.

    Args:
        percentage: Usage percentage; clamped to 0-100.
        width: Width of the progress bar in characters.

    Returns:
        Colored string with exactly `width` cells.
    """
    percentage = clamp_percentage(percentage)
    filled = int(width * percentage / 100)
    empty = width - filled

    cells = [get_gradient_color(i / width) + FILLED_CHAR for i in range(filled)]
    if empty > 0:
        cells.append(Colors.DIM_GRAY + EMPTY_CHAR * empty)
    return "".join(cells) + Colors.RESET


def get_label_color(percentage: float) -> str:
    """Get the color for a percentage label.

    Args:
        percentage: Usage percentage (0-100).

    Returns:
        ANSI color code string.
    """
    if percentage < 70:
        return Colors.GREEN
    elif percentage < 90:
        return Colors.YELLOW
    return Colors.RED


def format_percentage(percentage: float) -> str:
    """Format a percentage with its label color.

    Args:
        percentage: Usage percentage (0-100).

    Returns:
        Colored string like "45%".
    """
    color = get_label_color(percentage)
    return f"{color}{int(percentage)}%{Colors.RESET}"


__all__ = [
    "DEFAULT_BAR_WIDTH",
    "FILLED_CHAR",
    "EMPTY_CHAR",
    "clamp_percentage",
    "get_gradient_color",
    "make_progress_bar",
    "get_label_color",
    "format_percentage",
]
