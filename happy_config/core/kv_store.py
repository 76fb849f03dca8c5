"""
SOLE RESPONSIBILITY: Durable key-value storage for client settings that must outlive
sessions. Each store is an isolated namespace so clearing session or auth data never
touches the server override.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

from .error_codes import ConfigStoreError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal string store injected into the config layer."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStore:
    """In-process store, used by tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    """Key-value namespace persisted as a single JSON object on disk.

    A missing or corrupt file reads as an empty namespace. Writes go through a
    temp file and an atomic rename and raise ConfigStoreError on failure.
    """

    def __init__(self, directory: Path, namespace: str):
        """
        Args:
            directory: Application directory holding the namespace file
            namespace: Namespace id, becomes ``<namespace>.json``
        """
        self.namespace = namespace
        self.storage_path = Path(directory) / f"{namespace}.json"

    def _load(self) -> Dict[str, str]:
        if not self.storage_path.exists():
            return {}

        try:
            with open(self.storage_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring unreadable store {self.storage_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring store {self.storage_path}: expected a JSON object")
            return {}

        # Non-string values are dropped rather than coerced
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: Dict[str, str]) -> None:
        try:
            self.storage_path.parent.mkdir(parents=True, exist_ok=True)

            # Write to temp file first for atomicity
            temp_path = self.storage_path.with_suffix(".tmp")
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)

            temp_path.replace(self.storage_path)
        except OSError as e:
            logger.error(f"Failed to write store {self.storage_path}: {e}")
            raise ConfigStoreError(f"Could not write {self.storage_path}: {e}", path=self.storage_path) from e

        logger.debug(f"Saved {len(data)} keys to {self.storage_path}")

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if key not in data:
            return
        del data[key]
        self._save(data)
