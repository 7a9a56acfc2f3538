"""API client for the Claude Code OAuth usage endpoint.

Makes exactly one request per call. There is no retry or caching: the
status line host re-invokes the tool on its own refresh cadence.
"""

from __future__ import annotations

import json
import logging
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from claude_usage_status._version import __version__
from claude_usage_status.api.models import UsageSnapshot
from claude_usage_status.errors import (
    DecodeError,
    NetworkTimeoutError,
    categorize_http_error,
    categorize_network_error,
)

logger = logging.getLogger(__name__)

# API endpoint
API_URL = "https://api.anthropic.com/api/oauth/usage"
API_BETA_HEADER = "oauth-2025-04-20"

# Seconds; used by the CLI, the client itself imposes no deadline
DEFAULT_TIMEOUT = 10


def build_request(token: str, api_url: str = API_URL) -> Request:
    """Build the authenticated GET request for the usage endpoint.

    Args:
        token: OAuth access token.
        api_url: Full endpoint URL.

    Returns:
        Request with the headers the endpoint requires.
    """
    return Request(
        api_url,
        method="GET",
        headers={
            "Accept": "application/json",
            "Authorization": f"Bearer {token}",
            "anthropic-beta": API_BETA_HEADER,
            "User-Agent": f"claude-usage-status/{__version__}",
        },
    )


def _read_error_body(error: HTTPError) -> str:
    try:
        return error.read().decode("utf-8", errors="replace").strip()
    except (OSError, AttributeError, TypeError):
        # HTTPError built without a body (fp=None)
        return ""


def _reject_constant(name: str) -> float:
    raise DecodeError(f"failed to parse usage response: invalid number {name}")


def decode_usage(body: bytes) -> UsageSnapshot:
    """Decode a usage response body.

    Args:
        body: Raw response bytes.

    Returns:
        Parsed UsageSnapshot.

    Raises:
        DecodeError: If the body is not JSON of the expected shape.
    """
    try:
        data = json.loads(body.decode("utf-8"), parse_constant=_reject_constant)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"failed to parse usage response: {e}") from e
    return UsageSnapshot.from_dict(data)


def fetch_usage(
    token: str,
    api_url: str = API_URL,
    timeout: float | None = None,
) -> UsageSnapshot:
    """Fetch current usage from the OAuth API.

    Args:
        token: OAuth access token.
        api_url: Endpoint URL, overridable for tests.
        timeout: Optional deadline in seconds. None waits indefinitely.

    Returns:
        UsageSnapshot with the five-hour and seven-day windows.

    Raises:
        HTTPStatusError: On a non-2xx response (status and body attached).
        TransportError: On DNS, connection or timeout failures.
        DecodeError: If a 2xx body cannot be decoded.
    """
    req = build_request(token, api_url)
    logger.debug("GET %s", api_url)

    # Keep the socket default when no deadline is given
    kwargs = {} if timeout is None else {"timeout": timeout}

    try:
        with urlopen(req, **kwargs) as response:
            status = response.status
            body = response.read()
    except HTTPError as e:
        body_text = _read_error_body(e)
        logger.debug("API responded %d", e.code)
        raise categorize_http_error(e.code, body_text) from e
    except URLError as e:
        raise categorize_network_error(str(e.reason)) from e
    except TimeoutError as e:
        raise NetworkTimeoutError(f"Connection timed out: {e}") from e
    except OSError as e:
        raise categorize_network_error(str(e)) from e

    logger.debug("API responded %d (%d bytes)", status, len(body))
    if not 200 <= status < 300:
        raise categorize_http_error(status, body.decode("utf-8", errors="replace").strip())

    return decode_usage(body)


__all__ = [
    "API_URL",
    "API_BETA_HEADER",
    "DEFAULT_TIMEOUT",
    "build_request",
    "decode_usage",
    "fetch_usage",
]
