"""Mini README: Ledger engine for tracking a balance against an expiry date.

Modules expose the arithmetic evaluator used to turn typed adjustments into
deltas, the state model and its snapshot format, the ``Ledger`` that applies
and undoes adjustments, and the derived budget outlook.
"""

from .errors import EmptyInput, InvalidExpression, InvalidFormat, LedgerError
from .expression import evaluate
from .models import SCHEMA_VERSION, Entry, LedgerState
from .outlook import BudgetOutlook, OutlookStatus, build_outlook
from .tracker import Ledger

__all__ = [
    "BudgetOutlook",
    "EmptyInput",
    "Entry",
    "InvalidExpression",
    "InvalidFormat",
    "Ledger",
    "LedgerError",
    "LedgerState",
    "OutlookStatus",
    "SCHEMA_VERSION",
    "build_outlook",
    "evaluate",
]
