"""API client and payload types.

Modules:
    client: Claude OAuth usage endpoint client
    models: Decoded usage snapshot types
"""

from claude_usage_status.api.client import (
    API_BETA_HEADER,
    API_URL,
    DEFAULT_TIMEOUT,
    build_request,
    decode_usage,
    fetch_usage,
)
from claude_usage_status.api.models import UsageBucket, UsageSnapshot

__all__ = [
    # Client
    "API_URL",
    "API_BETA_HEADER",
    "DEFAULT_TIMEOUT",
    "build_request",
    "decode_usage",
    "fetch_usage",
    # Models
    "UsageBucket",
    "UsageSnapshot",
]
