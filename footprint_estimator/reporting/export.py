"""
JSON report export.

``build_report()`` assembles one self-describing dict from an activity
record and everything derived from it; ``write_report_json()`` writes any
dict to disk as pretty-printed JSON and returns the written ``Path``.

Report shape::

    {
      "generated_at": "2026-10-19T09:00:00+00:00",
      "input":        {... camelCase activity fields ...},
      "breakdown":    {"transportation": .., "energy": .., "lifestyle": .., "total": ..},
      "assessment":   {"severity": .., "comparison": {..}, "category_shares": {..},
                       "equivalents": {"lbs_co2e": .., "trees_to_offset": .., ..}, ..},
      "recommendations": [{"rank": 1, "id": .., "savings": .., "reduction_pct": .., ...}],
      "summary":      {"total_savings": .., "overall_reduction_pct": .., "count": ..,
                       "quick_wins": ["reduce-electricity", ...]}
    }

Non-finite numbers are written as ``null`` so the file stays valid JSON.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence

from footprint_estimator.estimation.benchmark import FootprintAssessment
from footprint_estimator.models.activity import ActivityInput
from footprint_estimator.models.breakdown import EmissionsBreakdown
from footprint_estimator.models.recommendation import Recommendation
from footprint_estimator.recommendations.summary import ReductionSummary, reduction_percentage

logger = logging.getLogger(__name__)


def _finite_or_none(value: float | None) -> float | None:
    if value is None or not math.isfinite(value):
        return None
    return value


def recommendation_to_dict(
    rec:       Recommendation,
    rank:      int,
    breakdown: EmissionsBreakdown,
) -> dict[str, Any]:
    """Flatten one recommendation into a JSON-ready dict."""
    return {
        "rank":          rank,
        "id":            rec.id,
        "title":         rec.title,
        "description":   rec.description,
        "category":      rec.category.value,
        "impact":        rec.impact.value,
        "difficulty":    rec.difficulty.value,
        "cost":          rec.cost.value,
        "savings":       _finite_or_none(rec.savings),
        "reduction_pct": _finite_or_none(reduction_percentage(rec, breakdown)),
        "action_steps":  list(rec.action_steps),
    }


def build_report(
    activity:        ActivityInput,
    breakdown:       EmissionsBreakdown,
    assessment:      FootprintAssessment | None = None,
    recommendations: Sequence[Recommendation] | None = None,
    summary:         ReductionSummary | None = None,
    generated_at:    datetime | None = None,
) -> dict[str, Any]:
    """Assemble the report dict. Optional sections are omitted when ``None``."""
    if generated_at is None:
        generated_at = datetime.now(tz=timezone.utc)

    report: dict[str, Any] = {
        "generated_at": generated_at.isoformat(),
        "input": activity.to_flat(),
        "breakdown": {
            key: _finite_or_none(val) for key, val in breakdown.model_dump().items()
        },
    }

    if assessment is not None:
        report["assessment"] = {
            "severity": assessment.severity.value,
            "comparison": {
                "direction": assessment.comparison.direction,
                "difference_tons": _finite_or_none(assessment.comparison.difference_tons),
            },
            "category_shares": dict(assessment.category_shares),
            "equivalents": dataclasses.asdict(assessment.equivalents),
            "average_tons": assessment.average_tons,
            "global_target_tons": assessment.global_target_tons,
            "gap_to_target_tons": _finite_or_none(assessment.gap_to_target_tons),
        }

    if recommendations is not None:
        report["recommendations"] = [
            recommendation_to_dict(rec, rank, breakdown)
            for rank, rec in enumerate(recommendations, start=1)
        ]

    if summary is not None:
        report["summary"] = {
            "total_savings": _finite_or_none(summary.total_savings),
            "overall_reduction_pct": _finite_or_none(summary.overall_reduction_pct),
            "count": summary.count,
            "quick_wins": [rec.id for rec in summary.quick_wins],
        }

    return report


def write_report_json(report: dict[str, Any], path: Path) -> Path:
    """Write ``report`` to a pretty-printed JSON file.

    Args:
        report: Dict to serialise (normally from ``build_report()``).
        path:   Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report, indent=2, default=str), encoding="utf-8")
    logger.info("Report written: %s", path)
    return path
