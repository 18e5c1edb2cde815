"""Mini README: Core package initializer for the balance tracker.

The package records balance adjustments as an append-only ledger measured
against a budgeting period expiry. Convenience imports expose the ledger and
its errors so callers do not need to know the module layout.
"""

from .ledger import (
    EmptyInput,
    Entry,
    InvalidExpression,
    InvalidFormat,
    Ledger,
    LedgerError,
    LedgerState,
)
from .logging_utils import get_logger

__all__ = [
    "EmptyInput",
    "Entry",
    "InvalidExpression",
    "InvalidFormat",
    "Ledger",
    "LedgerError",
    "LedgerState",
    "get_logger",
]
