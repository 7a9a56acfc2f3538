"""Credential resolution.

Modules:
    credentials: Credential sources and token resolution
    security: Token masking and file permission checks
"""

from claude_usage_status.config.credentials import (
    KEYCHAIN_SERVICE,
    CredentialSource,
    FileCredentialSource,
    KeychainCredentialSource,
    default_sources,
    get_credentials_path,
    parse_credentials,
    resolve_access_token,
)
from claude_usage_status.config.security import check_file_permissions, mask_token

__all__ = [
    # Credentials
    "KEYCHAIN_SERVICE",
    "CredentialSource",
    "FileCredentialSource",
    "KeychainCredentialSource",
    "default_sources",
    "get_credentials_path",
    "parse_credentials",
    "resolve_access_token",
    # Security
    "check_file_permissions",
    "mask_token",
]
