"""Mini README: Data model for the balance ledger.

Structure:
    * Entry - one recorded adjustment, frozen once created.
    * LedgerState - version, balance, expiry, and ordered history.
    * SCHEMA_VERSION - schema tag written into every snapshot.

Snapshots use short keys (``ts``, ``expr``, ``desc``, ``delta``,
``balance``) for entries so exported backups stay compact and compatible
with earlier files. ``LedgerState.from_dict`` is deliberately permissive:
only a truthy ``version`` and a list ``history`` are required, and missing
fields fall back to neutral values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from ..utils import round2, today_iso
from .errors import InvalidFormat

SCHEMA_VERSION = 1


@dataclass(frozen=True, slots=True)
class Entry:
    """A single balance adjustment and the balance it produced."""

    timestamp: int
    expression: str
    description: str
    delta: float
    balance_after: float

    def as_dict(self) -> Dict[str, Any]:
        """Export the entry with snapshot field names."""

        return {
            "ts": self.timestamp,
            "expr": self.expression,
            "desc": self.description,
            "delta": self.delta,
            "balance": self.balance_after,
        }

    @classmethod
    def from_dict(cls, payload: Any) -> "Entry":
        """Build an entry from a snapshot item, rejecting non-numeric deltas."""

        if not isinstance(payload, Mapping):
            raise InvalidFormat("History items must be objects.")
        delta = _as_number(payload.get("delta"), "delta")
        balance_after = payload.get("balance")
        return cls(
            timestamp=int(_as_number(payload.get("ts", 0), "ts")),
            expression=str(payload.get("expr", "")),
            description=str(payload.get("desc", "")),
            delta=delta,
            balance_after=delta if balance_after is None else _as_number(balance_after, "balance"),
        )


@dataclass(slots=True)
class LedgerState:
    """The whole persisted unit owned by a ``Ledger``."""

    version: int = SCHEMA_VERSION
    balance: float = 0.0
    expiry: str = field(default_factory=today_iso)
    history: List[Entry] = field(default_factory=list)

    @classmethod
    def default(cls, today: Optional[date] = None) -> "LedgerState":
        """Fresh state: zero balance, expiring today, no history."""

        return cls(expiry=today_iso(today))

    def ledger_sum(self) -> float:
        """Rounded sum of every recorded delta."""

        return round2(sum(entry.delta for entry in self.history))

    def as_dict(self) -> Dict[str, Any]:
        """Export the state with serialisable values."""

        return {
            "version": self.version,
            "balance": self.balance,
            "expiry": self.expiry,
            "history": [entry.as_dict() for entry in self.history],
        }

    @classmethod
    def from_dict(cls, payload: Any, today: Optional[date] = None) -> "LedgerState":
        """Validate a decoded snapshot and build a state from it."""

        if not isinstance(payload, Mapping):
            raise InvalidFormat("Snapshot must be an object.")
        if not payload.get("version"):
            raise InvalidFormat("Snapshot is missing a version.")
        raw_history = payload.get("history")
        if not isinstance(raw_history, list):
            raise InvalidFormat("Snapshot history must be a list.")

        history = [Entry.from_dict(item) for item in raw_history]
        if not math.isfinite(sum(entry.delta for entry in history)):
            raise InvalidFormat("Snapshot deltas overflow when summed.")
        state = cls(
            version=payload["version"],
            expiry=str(payload.get("expiry") or today_iso(today)),
            history=history,
        )
        balance = payload.get("balance")
        state.balance = state.ledger_sum() if balance is None else _as_number(balance, "balance")
        return state


def _as_number(value: Any, name: str) -> float:
    """Coerce snapshot numbers, refusing booleans, text and non-finite values."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidFormat(f"Field '{name}' must be a number, got {value!r}.")
    try:
        number = float(value)
    except OverflowError as error:
        raise InvalidFormat(f"Field '{name}' is out of range.") from error
    if not math.isfinite(number):
        raise InvalidFormat(f"Field '{name}' must be finite, got {value!r}.")
    return number
