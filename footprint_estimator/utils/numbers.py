"""
Numeric helpers shared by the estimator and the reporting layer.

``round_half_up()`` rounds the *exact* binary value of a float to a fixed
number of decimals, resolving ties away from zero. That is how
``Number.prototype.toFixed`` behaves in browsers, and it differs from the
built-in ``round()`` (banker's rounding) on values such as ``0.125``.
Reference outputs produced by web front-ends therefore reproduce exactly.

Non-finite inputs (``inf``, ``-inf``, ``nan``) are returned unchanged.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

# Enough digits for the integer part of any finite double plus the fraction.
_CONTEXT = Context(prec=400)


def round_half_up(value: float, places: int = 2) -> float:
    """Round ``value`` to ``places`` decimals, ties away from zero.

    Args:
        value:  Any float, including non-finite values.
        places: Number of decimal places (>= 0).

    Returns:
        The rounded float, or ``value`` itself when it is not finite.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT))


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide like IEEE-754 does: ``x / 0`` → ``±inf``, ``0 / 0`` → ``nan``.

    Python raises ``ZeroDivisionError`` on float division by zero; callers that
    deliberately leave a zero denominator unguarded use this instead.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator
