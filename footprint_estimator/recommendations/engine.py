"""
Recommendation engine: evaluates the catalog against one activity record.

Usage flow
----------
1. breakdown = estimate(activity)
2. recommend(activity, breakdown)
   -> list[Recommendation]  (sorted by savings, highest first)

Ranking
-------
Candidates are generated in ``CATALOG`` order, then sorted by ``savings``
descending with Python's stable sort, so equal savings keep catalog order
(``reduce-driving`` before ``upgrade-car`` and so on).

The breakdown must be the one ``estimate()`` produced for the same activity;
it is read, never modified. Non-finite breakdown values (from a zero
``car_efficiency``) give non-finite savings and are not filtered.
"""

from __future__ import annotations

import logging

from footprint_estimator.models.activity import ActivityInput
from footprint_estimator.models.breakdown import EmissionsBreakdown
from footprint_estimator.models.recommendation import Recommendation
from footprint_estimator.recommendations.catalog import CATALOG, RecommendationTemplate

logger = logging.getLogger(__name__)


def build_recommendation(
    template:  RecommendationTemplate,
    activity:  ActivityInput,
    breakdown: EmissionsBreakdown,
) -> Recommendation:
    """Instantiate one template for a given activity and breakdown."""
    return Recommendation(
        id=template.id,
        title=template.title,
        description=template.description,
        category=template.category,
        impact=template.impact,
        savings=template.savings(activity, breakdown),
        difficulty=template.difficulty,
        cost=template.cost,
        action_steps=template.action_steps,
    )


def generate_candidates(
    activity:  ActivityInput,
    breakdown: EmissionsBreakdown,
) -> list[Recommendation]:
    """Return every applicable recommendation, in catalog (generation) order."""
    return [
        build_recommendation(template, activity, breakdown)
        for template in CATALOG
        if template.guard(activity)
    ]


def recommend(
    activity:  ActivityInput,
    breakdown: EmissionsBreakdown,
) -> list[Recommendation]:
    """Derive the ranked reduction recommendations for an activity record.

    Args:
        activity:  The submitted activity record.
        breakdown: ``estimate(activity)``.

    Returns:
        Applicable recommendations, sorted by ``savings`` descending;
        ties keep catalog order.
    """
    candidates = generate_candidates(activity, breakdown)
    ranked = sorted(candidates, key=lambda r: r.savings, reverse=True)
    logger.debug(
        "Generated %d recommendation(s): %s",
        len(ranked), ", ".join(r.id for r in ranked),
    )
    return ranked
