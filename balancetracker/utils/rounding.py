"""Mini README: Currency rounding helper.

Balances are rounded half away from zero on the float's shortest decimal
representation, so ``1.005`` becomes ``1.01`` as a person reading the value
would expect, rather than ``1.0`` as binary rounding gives.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

_CENTS = Decimal("0.01")
# Wide enough for every finite float plus two decimal places.
_CONTEXT = Context(prec=400)


def round2(value: float) -> float:
    """Round ``value`` to two decimal places, halves away from zero."""

    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value {value!r}")
    rounded = Decimal(repr(value)).quantize(_CENTS, rounding=ROUND_HALF_UP, context=_CONTEXT)
    return float(rounded)
