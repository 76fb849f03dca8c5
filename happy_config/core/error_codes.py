"""
SOLE RESPONSIBILITY: Centralized error kinds and categories for happy-config.
Every validation and probe failure is reported as one of these kinds and rendered
as a user-facing message at the UI boundary.
"""

from enum import Enum
from typing import Dict


class ErrorCategory(Enum):
    """High-level error classification."""

    SYNTAX = "syntax"  # Local checks, no I/O
    NETWORK = "network"  # Requires a round trip to the candidate server


class ErrorKind(str, Enum):
    """Trackable error identifiers for server URL validation and probing."""

    # Syntactic errors
    EMPTY_URL = "empty_url"
    MALFORMED_URL = "malformed_url"
    UNSUPPORTED_SCHEME = "unsupported_scheme"

    # Probe errors
    CONNECTION_FAILED = "connection_failed"
    SERVER_ERROR = "server_error"
    NOT_A_COMPATIBLE_SERVER = "not_a_compatible_server"

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORIES[self]

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_CATEGORIES: Dict[ErrorKind, ErrorCategory] = {
    ErrorKind.EMPTY_URL: ErrorCategory.SYNTAX,
    ErrorKind.MALFORMED_URL: ErrorCategory.SYNTAX,
    ErrorKind.UNSUPPORTED_SCHEME: ErrorCategory.SYNTAX,
    ErrorKind.CONNECTION_FAILED: ErrorCategory.NETWORK,
    ErrorKind.SERVER_ERROR: ErrorCategory.NETWORK,
    ErrorKind.NOT_A_COMPATIBLE_SERVER: ErrorCategory.NETWORK,
}

_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.EMPTY_URL: "Server URL cannot be empty",
    ErrorKind.MALFORMED_URL: "Invalid URL format",
    ErrorKind.UNSUPPORTED_SCHEME: "Server URL must use HTTP or HTTPS protocol",
    ErrorKind.CONNECTION_FAILED: "Failed to connect to server",
    ErrorKind.SERVER_ERROR: "Server returned an error",
    ErrorKind.NOT_A_COMPATIBLE_SERVER: "Not a valid Happy Server",
}


class ConfigStoreError(Exception):
    """Raised when the persisted server configuration cannot be written."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
