"""Mini README: Date helpers for budgeting periods.

Expiry dates travel as ISO-8601 strings (``YYYY-MM-DD``) both in snapshots
and at the interfaces. These helpers convert, compare, and clamp them.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[str, date, datetime]


def today_iso(today: Optional[date] = None) -> str:
    """Return today's date (or ``today``) formatted as ISO-8601."""

    return (today or date.today()).isoformat()


def parse_iso_date(value: DateLike) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError as error:
            raise ValueError(f"Not an ISO-8601 date: {value!r}") from error
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")


def days_between(later: DateLike, earlier: DateLike) -> int:
    """Whole days from ``earlier`` to ``later``; negative when reversed."""

    return (parse_iso_date(later) - parse_iso_date(earlier)).days


def clamp_to_today(value: DateLike, today: Optional[date] = None) -> str:
    """Return ``value`` as ISO text, replaced by today when it lies in the past."""

    reference = today or date.today()
    parsed = parse_iso_date(value)
    return max(parsed, reference).isoformat()
