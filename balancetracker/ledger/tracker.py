"""Mini README: Balance ledger with undo and snapshot import/export.

Structure:
    * Ledger - owns a ``LedgerState`` and every operation that mutates it.

Each public operation builds the next state, writes the complete snapshot to
the injected storage under a single namespace key, and only then adopts it,
so a failed write leaves the ledger exactly as it was.
Reading the snapshot at construction never fails: missing or corrupt data
degrades to a fresh state and a warning in the log. Instances are created
by the entry points (CLI, HTTP API) and handed around explicitly.
"""

from __future__ import annotations

import json
import math
import time
from dataclasses import replace
from datetime import date
from typing import Callable, Optional

from ..configuration import DEFAULT_STORAGE_KEY
from ..logging_utils import get_logger
from ..storage import KeyValueStorage
from ..utils import round2
from .errors import EmptyInput, InvalidExpression, InvalidFormat
from .expression import evaluate
from .models import Entry, LedgerState

LOGGER = get_logger(__name__)

_SIGN_PREFIXES = ("+", "-", "*", "/")


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class Ledger:
    """Track a running balance as an append-only history of adjustments."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        clock: Callable[[], int] = _epoch_millis,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self._storage = storage
        self._storage_key = storage_key
        self._clock = clock
        self._today = today or date.today
        self.state = self._load()
        LOGGER.debug(
            "Ledger initialised with %s entries, balance %.2f",
            len(self.state.history),
            self.state.balance,
        )

    def _load(self) -> LedgerState:
        """Read the persisted snapshot, falling back to a fresh state."""

        try:
            raw = self._storage.get(self._storage_key)
        except (OSError, UnicodeDecodeError) as error:
            LOGGER.warning("Could not read snapshot '%s': %s", self._storage_key, error)
            return LedgerState.default(self._today())
        if raw is None:
            LOGGER.debug("No snapshot stored under '%s'; starting fresh", self._storage_key)
            return LedgerState.default(self._today())
        try:
            return self._parse(raw)
        except InvalidFormat as error:
            LOGGER.warning(
                "Discarding unusable snapshot '%s', using defaults: %s", self._storage_key, error
            )
            return LedgerState.default(self._today())

    def _parse(self, text: str) -> LedgerState:
        try:
            payload = json.loads(text)
        except (TypeError, ValueError, RecursionError) as error:
            raise InvalidFormat(f"Snapshot is not valid JSON: {error}") from error
        return LedgerState.from_dict(payload, today=self._today())

    def _commit(self, state: LedgerState) -> None:
        """Persist ``state`` and make it current; storage errors leave the old state."""

        self._storage.set(self._storage_key, json.dumps(state.as_dict()))
        self.state = state

    def add_entry(self, raw_text: str, description: str) -> float:
        """Evaluate ``raw_text``, record it against ``description`` and return the delta."""

        expression = (raw_text or "").strip()
        if not expression:
            raise EmptyInput("Enter an amount or expression.")
        if not expression.startswith(_SIGN_PREFIXES):
            expression = "+" + expression

        delta = evaluate(expression)
        if not math.isfinite(self.state.balance + delta):
            raise InvalidExpression(f"Adjustment {expression!r} overflows the balance.")
        new_balance = round2(self.state.balance + delta)
        entry = Entry(
            timestamp=self._clock(),
            expression=expression,
            description=description,
            delta=delta,
            balance_after=new_balance,
        )
        self._commit(
            replace(self.state, balance=new_balance, history=[*self.state.history, entry])
        )
        LOGGER.info("Recorded %s (%s) -> balance %.2f", expression, description, new_balance)
        return delta

    def undo(self) -> bool:
        """Drop the most recent entry; ``False`` when there is nothing to undo."""

        if not self.state.history:
            return False
        removed = self.state.history[-1]
        remaining = replace(self.state, history=self.state.history[:-1])
        remaining.balance = remaining.ledger_sum()
        self._commit(remaining)
        LOGGER.info(
            "Undid %s (%s) -> balance %.2f",
            removed.expression,
            removed.description,
            self.state.balance,
        )
        return True

    def recompute_balance(self) -> None:
        """Reset the balance to the rounded sum of the recorded deltas."""

        self.state.balance = self.state.ledger_sum()

    def update_expiry(self, expiry: str) -> None:
        """Replace the period expiry date."""

        self._commit(replace(self.state, expiry=expiry))
        LOGGER.info("Expiry set to %s", expiry)

    def import_data(self, serialized: str) -> None:
        """Replace the whole state with a JSON snapshot, validating its shape first."""

        imported = self._parse(serialized)
        self._commit(imported)
        LOGGER.info(
            "Imported snapshot with %s entries, balance %.2f", len(imported.history), imported.balance
        )

    def export_data(self) -> str:
        """Return the full state as indented JSON."""

        return json.dumps(self.state.as_dict(), indent=2)
