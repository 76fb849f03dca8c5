"""
Core server configuration logic for happy-config.
This module holds everything with a testable contract: storage, validation and probing.
"""

from .error_codes import ConfigStoreError, ErrorCategory, ErrorKind
from .kv_store import JsonFileStore, KeyValueStore, MemoryStore
from .models import ProbeResult, ResolvedServerInfo, ValidationResult
from .probe import SERVER_GREETING, probe_server
from .server_config import (
    DEFAULT_SERVER_URL,
    SERVER_CONFIG_NAMESPACE,
    SERVER_KEY,
    ServerConfigStore,
)
from .validation import validate_server_url

__all__ = [
    # Errors
    "ConfigStoreError",
    "ErrorCategory",
    "ErrorKind",
    # Storage
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "ServerConfigStore",
    "DEFAULT_SERVER_URL",
    "SERVER_CONFIG_NAMESPACE",
    "SERVER_KEY",
    # Validation and probing
    "ProbeResult",
    "ResolvedServerInfo",
    "ValidationResult",
    "SERVER_GREETING",
    "probe_server",
    "validate_server_url",
]
