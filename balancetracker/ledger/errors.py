"""Mini README: Error taxonomy raised by the ledger.

All errors derive from ``LedgerError`` (itself a ``ValueError``) so callers
can catch the family at once. Interfaces translate them into user-facing
messages; the ledger never does.
"""

from __future__ import annotations


class LedgerError(ValueError):
    """Base class for failures reported by ledger operations."""


class InvalidExpression(LedgerError):
    """Adjustment text contains disallowed characters or cannot be evaluated."""


class EmptyInput(LedgerError):
    """Adjustment text is empty once surrounding whitespace is removed."""


class InvalidFormat(LedgerError):
    """An imported or persisted snapshot fails structural validation."""
