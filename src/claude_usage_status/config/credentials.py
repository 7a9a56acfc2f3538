"""Credential resolution for claude-usage-status.

Reads the Claude Code OAuth access token from the platform's credential
sources. Every source exposes ``read_token()``; the set of sources is chosen
once from the running platform and tried in order:

- all platforms: ~/.claude/.credentials.json
- macOS: the "Claude Code-credentials" Keychain item as a fallback

Credentials are read fresh on every call and never cached or written.
"""

from __future__ import annotations

import json
import logging
import platform
import subprocess
from pathlib import Path

from claude_usage_status.config.security import check_file_permissions, mask_token
from claude_usage_status.errors import (
    CredentialEmptyError,
    CredentialError,
    CredentialNotFoundError,
    CredentialParseError,
    SecretStoreUnavailableError,
)

logger = logging.getLogger(__name__)

KEYCHAIN_SERVICE = "Claude Code-credentials"


def get_credentials_path() -> Path:
    """Get the path to the Claude Code credentials file.

    Returns:
        ~/.claude/.credentials.json for the current user.
    """
    return Path.home() / ".claude" / ".credentials.json"


def parse_credentials(raw: str, origin: str) -> str:
    """Extract the access token from a credentials JSON document.

    Args:
        raw: JSON text shaped like {"claudeAiOauth": {"accessToken": "..."}}.
        origin: Where the text came from, used in error messages.

    Returns:
        The non-empty access token.

    Raises:
        CredentialParseError: If the text is not JSON or has the wrong shape.
        CredentialEmptyError: If the access token is missing or blank.
    """
    try:
        creds = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CredentialParseError(f"failed to parse {origin}: {e}") from e

    if not isinstance(creds, dict):
        raise CredentialParseError(f"failed to parse {origin}: expected a JSON object")

    oauth = creds.get("claudeAiOauth") or {}
    if not isinstance(oauth, dict):
        raise CredentialParseError(f"failed to parse {origin}: 'claudeAiOauth' is not an object")

    token = oauth.get("accessToken")
    if token is not None and not isinstance(token, str):
        raise CredentialParseError(f"failed to parse {origin}: 'accessToken' is not a string")
    if not token or not token.strip():
        raise CredentialEmptyError(f"no access token found in {origin}")

    return token


class CredentialSource:
    """A place an OAuth access token can be read from."""

    name = "credentials"

    def describe(self) -> str:
        return self.name

    def read_token(self) -> str:
        raise NotImplementedError


class FileCredentialSource(CredentialSource):
    """Reads credentials from a JSON file on disk."""

    name = "credentials file"

    def __init__(self, path: Path | None = None):
        self.path = path or get_credentials_path()

    def describe(self) -> str:
        return str(self.path)

    def read_token(self) -> str:
        try:
            with open(self.path, encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError as e:
            raise CredentialNotFoundError("no such file or directory") from e
        except OSError as e:
            raise CredentialNotFoundError(f"cannot read {self.path}: {e.strerror or e}") from e

        is_secure, warning = check_file_permissions(self.path)
        if not is_secure:
            logger.debug(warning)

        return parse_credentials(raw, "credentials")


class KeychainCredentialSource(CredentialSource):
    """Reads credentials from the macOS Keychain via the `security` command."""

    name = "Keychain"

    def __init__(self, service: str = KEYCHAIN_SERVICE):
        self.service = service

    def describe(self) -> str:
        return f"Keychain item '{self.service}'"

    def read_token(self) -> str:
        try:
            result = subprocess.run(
                ["security", "find-generic-password", "-s", self.service, "-w"],
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise SecretStoreUnavailableError("'security' command not available") from e
        except subprocess.CalledProcessError as e:
            raise SecretStoreUnavailableError(
                f"failed to read from Keychain (exit {e.returncode})",
                details=(e.stderr or "").strip() or None,
            ) from e

        return parse_credentials(result.stdout.strip(), "Keychain credentials")


def default_sources() -> list[CredentialSource]:
    """Build the credential sources available on the running platform.

    Returns:
        Sources in the order they should be tried.
    """
    sources: list[CredentialSource] = [FileCredentialSource()]
    if platform.system() == "Darwin":
        sources.append(KeychainCredentialSource())
    return sources


def resolve_access_token(sources: list[CredentialSource] | None = None) -> str:
    """Return the first access token any source yields.

    Args:
        sources: Sources to try in order. Defaults to default_sources().

    Returns:
        The access token string.

    Raises:
        CredentialError: The last source's failure, with a message naming
            every location that was tried.
    """
    if sources is None:
        sources = default_sources()

    last_error: CredentialError | None = None
    for source in sources:
        logger.debug("Reading token from %s", source.describe())
        try:
            token = source.read_token()
        except CredentialError as e:
            logger.debug("%s failed: %s", source.name, e.message)
            last_error = e
            continue
        logger.debug("Using token %s from %s", mask_token(token), source.name)
        return token

    if last_error is None:
        raise CredentialNotFoundError("no credential sources configured")

    attempted = " or ".join(source.describe() for source in sources)
    raise type(last_error)(
        f"credentials not found at {attempted}: {last_error.message}",
        details=last_error.details,
    ) from last_error


__all__ = [
    "KEYCHAIN_SERVICE",
    "CredentialSource",
    "FileCredentialSource",
    "KeychainCredentialSource",
    "get_credentials_path",
    "parse_credentials",
    "default_sources",
    "resolve_access_token",
]
