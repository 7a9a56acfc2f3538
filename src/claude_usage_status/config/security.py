"""Security utilities for handling the OAuth token and credentials file."""

from __future__ import annotations

import stat
from pathlib import Path


def mask_token(token: str, prefix_len: int = 8, suffix_len: int = 4) -> str:
    """Mask a token for safe logging/display.

    Args:
        token: Token to mask.
        prefix_len: Number of prefix characters to show.
        suffix_len: Number of suffix characters to show.

    Returns:
        Masked token string (e.g., "sk-ant-o...yyyy").
    """
    if not token:
        return "<empty>"

    if len(token) <= prefix_len + suffix_len:
        return "*" * len(token)

    return f"{token[:prefix_len]}...{token[-suffix_len:]}"


def check_file_permissions(path: Path) -> tuple[bool, str | None]:
    """Check if file has secure permissions (0600 or stricter).

    Args:
        path: Path to the file.

    Returns:
        Tuple of (is_secure, warning_message).
    """
    try:
        mode = path.stat().st_mode
    except OSError as e:
        return False, f"Cannot check permissions for {path}: {e}"

    # Group or other have any permissions
    if mode & (stat.S_IRWXG | stat.S_IRWXO):
        current_perms = oct(mode)[-3:]
        return False, f"File {path} has insecure permissions ({current_perms}), should be 600"
    return True, None


__all__ = ["mask_token", "check_file_permissions"]
