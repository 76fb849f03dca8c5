"""
SOLE RESPONSIBILITY: Manages all client-side configuration, primarily where the
durable settings live and which build-time default server URL applies.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from ..core.kv_store import JsonFileStore
from ..core.server_config import SERVER_CONFIG_NAMESPACE, ServerConfigStore

APP_NAME = "happy"


@dataclass
class AppConfig:
    """Client configuration resolved once at startup."""

    app_dir: Path
    build_default_url: Optional[str] = None
    debug: bool = False

    @classmethod
    def load(cls) -> "AppConfig":
        """
        Load configuration in priority order:
        1. Environment variables (highest)
        2. Platform application directory (typer.get_app_dir)
        """
        app_dir = os.environ.get("HAPPY_CONFIG_DIR") or typer.get_app_dir(APP_NAME)

        return cls(
            app_dir=Path(app_dir),
            # Empty values fall through to the hardcoded default
            build_default_url=os.environ.get("HAPPY_SERVER_URL") or None,
            debug=bool(os.environ.get("HAPPY_CONFIG_DEBUG")),
        )

    def server_config_store(self) -> ServerConfigStore:
        """Config store over the server-config namespace, separate from session data."""
        store = JsonFileStore(self.app_dir, SERVER_CONFIG_NAMESPACE)
        return ServerConfigStore(store, build_default_url=self.build_default_url)
