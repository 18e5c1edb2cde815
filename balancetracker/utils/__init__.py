"""Mini README: Utility helpers shared by the ledger and its interfaces.

Exports date arithmetic for budgeting periods and the currency rounding
used for every balance mutation.
"""

from .dates import clamp_to_today, days_between, parse_iso_date, today_iso
from .rounding import round2

__all__ = ["clamp_to_today", "days_between", "parse_iso_date", "round2", "today_iso"]
