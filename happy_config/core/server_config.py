"""
SOLE RESPONSIBILITY: Resolves the effective Happy server URL and persists the user's
custom override in its own key-value namespace, so it survives restarts and logouts.
"""

import logging
from typing import Optional

import httpx

from .kv_store import KeyValueStore
from .models import ResolvedServerInfo
from .validation import parse_absolute_url

logger = logging.getLogger(__name__)

SERVER_CONFIG_NAMESPACE = "server-config"
SERVER_KEY = "custom-server-url"
DEFAULT_SERVER_URL = "https://api.cluster-fluster.com"


class ServerConfigStore:
    """Server URL override backed by an injected key-value store."""

    def __init__(self, store: KeyValueStore, build_default_url: Optional[str] = None):
        """
        Args:
            store: Durable namespace holding the override
            build_default_url: Deployment-provided default, read once at startup
        """
        self.store = store
        self.build_default_url = build_default_url

    def get_custom_url(self) -> Optional[str]:
        """Stored override only, None when the fallback chain is in effect."""
        return self.store.get(SERVER_KEY) or None

    def get_effective_url(self) -> str:
        """
        Determines the server URL using three-tier priority.
        Priority: Stored override > Build-time default > Hardcoded default
        """
        return self.get_custom_url() or self.build_default_url or DEFAULT_SERVER_URL

    def set_custom_url(self, url: Optional[str]) -> None:
        """
        Persist the trimmed override, or clear it when url is None or blank.
        Callers validate before calling; nothing is re-checked here.
        """
        if url and url.strip():
            self.store.set(SERVER_KEY, url.strip())
            logger.info(f"Custom server URL set to {url.strip()}")
        else:
            self.store.delete(SERVER_KEY)
            logger.info("Custom server URL cleared, using default")

    def is_using_custom_server(self) -> bool:
        # Compared against the hardcoded default only, so a differing
        # build-time default also counts as custom
        return self.get_effective_url() != DEFAULT_SERVER_URL

    def get_resolved_info(self) -> ResolvedServerInfo:
        url = self.get_effective_url()
        is_custom = self.is_using_custom_server()

        try:
            parsed = parse_absolute_url(url)
        except httpx.InvalidURL as e:
            logger.warning(f"Effective server URL does not parse, reporting it raw: {e}")
            return ResolvedServerInfo(hostname=url, port=None, is_custom=is_custom)

        hostname = parsed.host or url
        if ":" in parsed.host:
            # IPv6 literal, reported bracketed as in the URL
            hostname = f"[{parsed.host}]"
        return ResolvedServerInfo(hostname=hostname, port=parsed.port, is_custom=is_custom)
