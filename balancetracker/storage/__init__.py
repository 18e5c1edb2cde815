"""Mini README: Key-value storage backends for ledger snapshots.

Exports the abstract ``KeyValueStorage`` interface plus an in-memory store
(tests, ephemeral sessions) and a JSON file store (CLI and HTTP API).
"""

from .base import KeyValueStorage
from .json_file import JsonFileStorage
from .memory import MemoryStorage

__all__ = ["JsonFileStorage", "KeyValueStorage", "MemoryStorage"]
