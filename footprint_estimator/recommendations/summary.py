"""
Derived aggregates over a ranked recommendation list.

These are the figures a results view shows next to the list itself:

  - total potential savings  = sum of every recommendation's savings
  - reduction percentage     = savings / breakdown.total * 100
  - quick wins               = easy recommendations, in ranked order,
                               truncated to a caller-chosen limit

``reduction_percentage()`` does not guard a zero total: it returns ``inf``
or ``nan``, and callers decide whether to display it. ``summarize()`` is
the presentation-facing wrapper and reports ``None`` instead.

Note that savings overlap (offsetting and solar both count the same energy
emissions), so total potential savings can exceed the footprint itself.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from footprint_estimator.models.breakdown import EmissionsBreakdown
from footprint_estimator.models.recommendation import Recommendation
from footprint_estimator.utils.numbers import safe_ratio

DEFAULT_QUICK_WIN_LIMIT = 4


@dataclass(frozen=True)
class ReductionSummary:
    """Headline figures for a recommendation list.

    Attributes:
        total_savings:         Sum of all savings (tons CO₂e per year).
        overall_reduction_pct: total_savings as a percentage of the footprint,
                               or ``None`` when the footprint total is zero.
        count:                 Number of recommendations.
        quick_wins:            Easy recommendations, ranked, truncated.
    """

    total_savings:         float
    overall_reduction_pct: float | None
    count:                 int
    quick_wins:            tuple[Recommendation, ...]


def total_potential_savings(recommendations: Sequence[Recommendation]) -> float:
    """Sum of savings across all recommendations, in list order."""
    total = 0.0
    for rec in recommendations:
        total += rec.savings
    return total


def reduction_percentage(
    recommendation: Recommendation,
    breakdown:      EmissionsBreakdown,
) -> float:
    """Savings of one recommendation as a percentage of the footprint total.

    A zero total yields ``inf`` (or ``nan`` for zero savings).
    """
    return safe_ratio(recommendation.savings, breakdown.total) * 100


def quick_wins(
    recommendations: Sequence[Recommendation],
    limit:           int | None = DEFAULT_QUICK_WIN_LIMIT,
) -> list[Recommendation]:
    """Easy recommendations in the given order, at most ``limit`` of them.

    Args:
        recommendations: Already-ranked recommendations.
        limit:           Maximum to return; ``None`` for no truncation.
    """
    easy = [rec for rec in recommendations if rec.is_quick_win]
    return easy if limit is None else easy[:limit]


def summarize(
    recommendations: Sequence[Recommendation],
    breakdown:       EmissionsBreakdown,
    quick_win_limit: int | None = DEFAULT_QUICK_WIN_LIMIT,
) -> ReductionSummary:
    """Build the ``ReductionSummary`` for a ranked list."""
    total_savings = total_potential_savings(recommendations)
    overall: float | None = None
    if breakdown.total != 0 and math.isfinite(breakdown.total):
        overall = total_savings / breakdown.total * 100

    return ReductionSummary(
        total_savings=total_savings,
        overall_reduction_pct=overall,
        count=len(recommendations),
        quick_wins=tuple(quick_wins(recommendations, quick_win_limit)),
    )
