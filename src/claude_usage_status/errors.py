"""Categorized error handling with actionable messages.

Every failure of the pipeline (credentials, transport, HTTP status, payload
decoding) is raised as a UsageStatusError subclass carrying a recovery
suggestion. All of them are fatal to the invocation and map to exit code 1.
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes.

    The status line wrapper only distinguishes success from failure, so
    every error category shares a single non-zero code.
    """

    SUCCESS = 0
    ERROR = 1


class UsageStatusError(Exception):
    """Base exception for claude-usage-status with structured error info.

    Attributes:
        message: Human-readable error message.
        code: Exit code for scripting.
        suggestion: Actionable recovery suggestion.
        details: Optional additional context.
    """

    code: ClassVar[ExitCode] = ExitCode.ERROR
    suggestion: ClassVar[str] = ""

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: str | None = None,
    ):
        self.message = message
        self._suggestion = suggestion
        self.details = details
        super().__init__(message)

    def get_suggestion(self) -> str:
        """Get the recovery suggestion."""
        return self._suggestion or self.suggestion

    def format_full(self) -> str:
        """Format the complete error message with details and suggestion."""
        parts = [f"Error: {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        suggestion = self.get_suggestion()
        if suggestion:
            parts.append(f"Suggestion: {suggestion}")
        return "\n".join(parts)


# Credential Errors


class CredentialError(UsageStatusError):
    """Base class for credential resolution failures."""

    suggestion = "Run 'claude' and sign in so Claude Code stores an OAuth token."


class CredentialNotFoundError(CredentialError):
    """No credentials file (or keychain entry) exists."""


class CredentialParseError(CredentialError):
    """Credentials exist but are not valid JSON of the expected shape."""

    suggestion = (
        "Your credentials appear corrupted. "
        "Try running 'claude' to re-authenticate."
    )


class CredentialEmptyError(CredentialError):
    """Credentials parsed but the access token is missing or blank."""


class SecretStoreUnavailableError(CredentialError):
    """The OS secret store could not be queried or has no entry."""

    suggestion = (
        "Ensure the 'security' command is available and the "
        "'Claude Code-credentials' keychain item exists."
    )


# Network Errors


class TransportError(UsageStatusError):
    """The request never produced an HTTP response."""

    suggestion = "Check your internet connection and try again."


class NetworkOfflineError(TransportError):
    """Connection could not be established."""


class NetworkTimeoutError(TransportError):
    """Request timed out."""

    suggestion = "The request timed out. Try again, or increase it with --timeout."


class NetworkDNSError(TransportError):
    """DNS resolution failed."""

    suggestion = (
        "DNS lookup failed. Check your network configuration or try a different DNS server."
    )


# HTTP Status Errors


class HTTPStatusError(UsageStatusError):
    """The usage endpoint answered with a non-2xx status.

    Attributes:
        status: HTTP status code.
        body: Response body, kept for diagnostics.
    """

    suggestion = "Try again later. If the problem persists, check Anthropic's status page."

    def __init__(
        self,
        message: str,
        status: int,
        body: str = "",
        suggestion: str | None = None,
    ):
        self.status = status
        self.body = body
        super().__init__(message, suggestion=suggestion, details=body or None)


class AuthenticationExpiredError(HTTPStatusError):
    """OAuth token was rejected (401)."""

    suggestion = (
        "Re-authenticate with Claude Code by running 'claude' and signing in again."
    )


class PermissionDeniedError(HTTPStatusError):
    """Token lacks access to the usage endpoint (403)."""

    suggestion = "Ensure you are signed in with a Claude subscription account."


class RateLimitError(HTTPStatusError):
    """API rate limit exceeded (429)."""

    suggestion = "You've hit the API rate limit. Refresh the status line less often."


class ServerError(HTTPStatusError):
    """API server error (5xx)."""

    suggestion = (
        "The Anthropic API is experiencing issues. "
        "Check status.anthropic.com and try again later."
    )


# Data Errors


class DecodeError(UsageStatusError):
    """A 2xx response body could not be decoded into usage data."""

    suggestion = "The usage endpoint returned an unexpected payload. Try again later."


def categorize_http_error(status_code: int, body: str = "") -> HTTPStatusError:
    """Convert an HTTP status code to the appropriate error type.

    Args:
        status_code: HTTP status code.
        body: Response body text.

    Returns:
        HTTPStatusError subclass instance carrying status and body.
    """
    message = f"API returned status {status_code}"
    if body:
        message += f": {body}"

    if status_code == 401:
        return AuthenticationExpiredError(message, status_code, body)
    elif status_code == 403:
        return PermissionDeniedError(message, status_code, body)
    elif status_code == 429:
        return RateLimitError(message, status_code, body)
    elif status_code >= 500:
        return ServerError(message, status_code, body)
    else:
        return HTTPStatusError(message, status_code, body)


def categorize_network_error(error_reason: str) -> TransportError:
    """Convert a network error reason to the appropriate error type.

    Args:
        error_reason: Error reason string from URLError or OSError.

    Returns:
        TransportError subclass instance.
    """
    reason_lower = error_reason.lower()

    if "timed out" in reason_lower or "timeout" in reason_lower:
        return NetworkTimeoutError(f"Connection timed out: {error_reason}")
    elif (
        "name or service not known" in reason_lower
        or "getaddrinfo" in reason_lower
        or "nodename nor servname" in reason_lower
    ):
        return NetworkDNSError(f"DNS resolution failed: {error_reason}")
    elif "connection refused" in reason_lower or "no route" in reason_lower:
        return NetworkOfflineError(f"Connection failed: {error_reason}")
    else:
        return NetworkOfflineError(f"Failed to fetch usage: {error_reason}")


def format_error_for_user(error: Exception, verbose: bool = False) -> str:
    """Format any exception for display on stderr.

    Args:
        error: Exception to format.
        verbose: If True, include details and suggestions.

    Returns:
        Formatted error message string.
    """
    if isinstance(error, UsageStatusError):
        if verbose:
            return error.format_full()
        return f"Error: {error.message}"
    else:
        return f"Error: {error}"


def get_exit_code(error: Exception | None) -> int:
    """Get the process exit code for an outcome.

    Args:
        error: Exception that ended the run, or None on success.

    Returns:
        Integer exit code.
    """
    if error is None:
        return ExitCode.SUCCESS
    if isinstance(error, UsageStatusError):
        return error.code
    return ExitCode.ERROR


__all__ = [
    # Exit codes
    "ExitCode",
    # Base error
    "UsageStatusError",
    # Credential errors
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialParseError",
    "CredentialEmptyError",
    "SecretStoreUnavailableError",
    # Network errors
    "TransportError",
    "NetworkOfflineError",
    "NetworkTimeoutError",
    "NetworkDNSError",
    # HTTP errors
    "HTTPStatusError",
    "AuthenticationExpiredError",
    "PermissionDeniedError",
    "RateLimitError",
    "ServerError",
    # Data errors
    "DecodeError",
    # Utilities
    "categorize_http_error",
    "categorize_network_error",
    "format_error_for_user",
    "get_exit_code",
]
