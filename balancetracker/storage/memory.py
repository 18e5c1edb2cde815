"""Mini README: In-memory storage backend."""

from __future__ import annotations

from typing import Dict, Optional

from .base import KeyValueStorage


class MemoryStorage(KeyValueStorage):
    """Dictionary-backed store that lives as long as the process."""

    backend_name = "memory"

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = str(value)
