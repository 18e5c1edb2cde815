"""Mini README: Budget outlook derived from a ledger state.

Structure:
    * OutlookStatus - healthy / caution / overspent classification.
    * BudgetOutlook - days left, safe daily spend and status for display.
    * build_outlook - computes the outlook for a reference date.

The expiry day counts as a spendable day, so a period expiring today still
has one day left. The on-track threshold scales a weekly allowance by the
days remaining.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, Optional

from ..logging_utils import get_logger
from ..utils import days_between
from .models import LedgerState

LOGGER = get_logger(__name__)


class OutlookStatus(str, Enum):
    """How the balance compares with the on-track threshold."""

    HEALTHY = "healthy"
    CAUTION = "caution"
    OVERSPENT = "overspent"


@dataclass(frozen=True, slots=True)
class BudgetOutlook:
    """Read-only summary of how long the balance has to last."""

    days_left: int
    threshold: float
    daily_safe: int
    status: OutlookStatus

    @property
    def expired(self) -> bool:
        """Whether the period has no spendable days left."""

        return self.days_left == 0

    def as_dict(self) -> Dict[str, object]:
        """Export the outlook with serialisable values."""

        return {
            "days_left": self.days_left,
            "threshold": self.threshold,
            "daily_safe": self.daily_safe,
            "status": self.status.value,
            "expired": self.expired,
        }


def build_outlook(
    state: LedgerState,
    *,
    today: Optional[date] = None,
    weekly_allowance: float = 250.0,
    caution_margin: float = 50.0,
) -> BudgetOutlook:
    """Summarise how long the balance has to last and whether it is on track."""

    reference = today or date.today()
    try:
        days_left = max(0, days_between(state.expiry, reference) + 1)
    except ValueError:
        LOGGER.warning("Unreadable expiry %r; treating the period as expired", state.expiry)
        days_left = 0

    threshold = days_left * weekly_allowance / 7
    daily_safe = math.floor(state.balance / days_left) if days_left else 0

    if state.balance >= threshold:
        status = OutlookStatus.HEALTHY
    elif threshold - caution_margin <= state.balance <= threshold + caution_margin:
        status = OutlookStatus.CAUTION
    else:
        status = OutlookStatus.OVERSPENT
    return BudgetOutlook(days_left=days_left, threshold=threshold, daily_safe=daily_safe, status=status)
