"""Mini README: Abstract key-value storage interface.

Structure:
    * KeyValueStorage - ``get``/``set`` of text values by key.

The ledger only ever stores whole snapshots as text, so backends never need
to understand the payload.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStorage(ABC):
    """Base interface for snapshot persistence backends."""

    backend_name: str = "generic"

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the text stored under ``key`` or ``None`` when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous text."""
