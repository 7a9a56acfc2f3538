"""Command-line interface for claude-usage-status.

Runs the pipeline ResolvingCredentials -> FetchingUsage -> Rendered. Any
failure ends the run: the error goes to stderr and nothing is printed to
stdout, so a status line never shows a partial result.
"""

from __future__ import annotations

import argparse
import logging
import platform
import sys
from datetime import datetime

from claude_usage_status._version import __version__
from claude_usage_status.api.client import API_URL, DEFAULT_TIMEOUT, fetch_usage
from claude_usage_status.config.credentials import CredentialSource, resolve_access_token
from claude_usage_status.display.colors import strip_ansi
from claude_usage_status.display.progress import DEFAULT_BAR_WIDTH
from claude_usage_status.display.statusline import STATUSLINE_PLACEHOLDER, format_status_line
from claude_usage_status.errors import ExitCode, format_error_for_user, get_exit_code

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="claude-usage-status",
        description="Show Claude Code 5-hour and 7-day usage as one status line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  claude-usage-status               Print the usage line
  claude-usage-status --statusline  Status line mode (placeholder on failure)
  claude-usage-status --no-color    Plain text output
  claude-usage-status -v            Debug logging on stderr

Claude Code settings.json:
  "statusLine": {"type": "command", "command": "claude-usage-status --statusline"}
""",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Show version and system information",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log each step to stderr and show error details",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        metavar="SECONDS",
        help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT}).",
    )
    parser.add_argument(
        "--api-url",
        default=API_URL,
        metavar="URL",
        help="Usage endpoint URL (default: %(default)s).",
    )
    parser.add_argument(
        "--statusline",
        action="store_true",
        help="Claude Code status line mode: discard stdin, print a placeholder on failure.",
    )

    return parser


def print_version() -> None:
    """Print version and system information."""
    print(
        f"claude-usage-status {__version__} "
        f"(Python {sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}, "
        f"{platform.system()} {platform.machine()})"
    )


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr, keeping stdout for the status line.

    Args:
        verbose: Log DEBUG breadcrumbs instead of warnings only.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    root = logging.getLogger("claude_usage_status")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def discard_stdin() -> None:
    """Drain the session JSON Claude Code pipes to status line commands."""
    if sys.stdin is None:
        return
    try:
        if not sys.stdin.isatty():
            sys.stdin.read()
    except (OSError, ValueError):
        logger.debug("stdin not readable, skipping")


def render_usage_line(
    api_url: str = API_URL,
    timeout: float | None = DEFAULT_TIMEOUT,
    now: datetime | None = None,
    sources: list[CredentialSource] | None = None,
    width: int = DEFAULT_BAR_WIDTH,
) -> str:
    """Resolve credentials, fetch usage and format the status line.

    Args:
        api_url: Usage endpoint URL.
        timeout: HTTP deadline in seconds; expiry is a transport error.
        now: Reference time for the reset countdown.
        sources: Credential sources to try. Defaults to the platform's.
        width: Progress bar width.

    Returns:
        The formatted status line.

    Raises:
        UsageStatusError: If any stage fails.
    """
    logger.debug("state: ResolvingCredentials")
    token = resolve_access_token(sources)

    logger.debug("state: FetchingUsage")
    snapshot = fetch_usage(token, api_url=api_url, timeout=timeout)

    logger.debug(
        "state: Rendered (5h=%s%%, 7d=%s%%)",
        snapshot.five_hour.utilization,
        snapshot.seven_day.utilization,
    )
    return format_status_line(snapshot, now=now, width=width)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the claude-usage-status CLI.

    Prints one line and exits 0 on success; prints "Error: <message>" to
    stderr and exits 1 on failure. In --statusline mode a failure prints
    the placeholder instead and still exits 0.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.version:
        print_version()
        return

    configure_logging(args.verbose)

    if args.statusline:
        discard_stdin()

    try:
        line = render_usage_line(api_url=args.api_url, timeout=args.timeout)
    except Exception as e:
        logger.debug("run failed", exc_info=True)
        if args.statusline:
            print(STATUSLINE_PLACEHOLDER)
            sys.exit(ExitCode.SUCCESS)
        print(format_error_for_user(e, verbose=args.verbose), file=sys.stderr)
        sys.exit(get_exit_code(e))

    if args.no_color:
        line = strip_ansi(line)
    print(line)


__all__ = [
    "create_parser",
    "print_version",
    "configure_logging",
    "discard_stdin",
    "render_usage_line",
    "main",
]
