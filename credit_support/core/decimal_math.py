"""Pure-Decimal helpers for collateral arithmetic.

All functions run in CSA_DECIMAL_CONTEXT. No float anywhere.

Functions
---------
round_to_nearest : (Decimal, Decimal) -> Decimal   (half-up to a multiple of step)
percent_of       : (Decimal, Decimal) -> Decimal   (amount * pct / 100)
sum_d            : Iterable[Decimal] -> Decimal    (exact sum, empty -> 0)
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, localcontext

from credit_support.core.money import CSA_DECIMAL_CONTEXT

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def round_to_nearest(x: Decimal, step: Decimal) -> Decimal:
    """Round x half-up to the nearest multiple of step.

    A zero step means no rounding and returns x unchanged. Ties round away
    from zero (``ROUND_HALF_UP``), so 10.25 with step 0.5 gives 10.5. A step
    with no positive exponent also fixes the result's exponent, so 100 with
    step 10 gives ``100`` and 10.9 with step 0.01 gives ``10.90``.

    Exact only while x has at most MAX_SIGNIFICANT_DIGITS significant digits.

    Raises
    ------
    ValueError
        If step < 0. Callers validate rounding increments before getting here.
    """
    if step < _ZERO:
        raise ValueError(f"round_to_nearest requires step >= 0, got {step}")
    if step == _ZERO:
        return x
    with localcontext(CSA_DECIMAL_CONTEXT):
        multiples = (x / step).to_integral_value(rounding=ROUND_HALF_UP)
        rounded = multiples * step
        if step.as_tuple().exponent <= 0:
            return rounded.quantize(step)
        return rounded


def percent_of(amount: Decimal, percentage: Decimal) -> Decimal:
    """Scale amount by a percentage expressed in percent units (90 means 90%)."""
    with localcontext(CSA_DECIMAL_CONTEXT):
        return amount * percentage / _HUNDRED


def sum_d(values: Iterable[Decimal]) -> Decimal:
    with localcontext(CSA_DECIMAL_CONTEXT):
        total = _ZERO
        for v in values:
            total = total + v
        return total
