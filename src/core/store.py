"""Key-value store singleton for persisted cart, order and admin state."""

import copy
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Protocol

from src.core.config import get_settings

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal get/set interface the services persist through."""

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> None:
        ...


class InMemoryStore:
    """Process-local store. Values are deep-copied in and out."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)


class JsonFileStore(InMemoryStore):
    """Store backed by a single JSON document on disk.

    The file is read once at construction and rewritten in full on every
    ``set``. A missing or unreadable file starts the store empty.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(self._load())

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error("Failed to read store file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.error("Store file %s does not hold a JSON object, ignoring it", self.path)
            return {}
        return data

    def set(self, key: str, value: Any) -> None:
        super().set(key, value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")


@lru_cache
def get_store() -> KeyValueStore:
    """Get cached store singleton for the configured backend.

    Returns:
        KeyValueStore: The process-wide store.
    """
    settings = get_settings()
    if settings.store_backend == "memory":
        return InMemoryStore()
    return JsonFileStore(settings.store_path)


async def check_store_connection() -> dict[str, Any]:
    """Check that the store can be opened and read.

    Returns:
        dict: Contains 'healthy' bool and optional 'error' message.
    """
    try:
        get_store().get("orders", [])
        return {"healthy": True}
    except Exception as e:
        logger.error("Store health check failed: %s", e)
        return {"healthy": False, "error": str(e)}
