"""
ASCII terminal formatters for CLI output.

All formatters accept already-computed domain objects and return plain
multi-line strings suitable for ``typer.echo()``. They never alter the
values they display, only format them.

No third-party dependencies (no ``rich``, no ``colorama``).

Degenerate totals
-----------------
A zero footprint total makes every percentage meaningless, so percentage
columns print ``n/a`` in that case instead of ``inf``/``nan``.
"""

from __future__ import annotations

import math
from typing import Sequence

from footprint_estimator.estimation.benchmark import FootprintAssessment
from footprint_estimator.models.breakdown import EmissionsBreakdown
from footprint_estimator.models.recommendation import Recommendation
from footprint_estimator.recommendations.summary import ReductionSummary, reduction_percentage
from footprint_estimator.utils.numbers import round_half_up

_RULE = "-" * 64


def _fmt_pct(value: float | None, places: int = 1) -> str:
    if value is None or not math.isfinite(value):
        return "n/a"
    return f"{round_half_up(value, places):.{places}f}%"


def _fmt_count(value: int | None, unit: str) -> str:
    return "n/a" if value is None else f"{value:,} {unit}"


# ── Breakdown ─────────────────────────────────────────────────────────────────


def format_breakdown(breakdown: EmissionsBreakdown) -> str:
    """Format the four breakdown values as a small table.

    Example::

        Category            tons CO2e/yr
        --------------------------------
        Transportation              6.50
        Energy                      9.72
        Lifestyle                   3.36
        --------------------------------
        Total                      19.58
    """
    lines = [
        f"  {'Category':<18}{'tons CO2e/yr':>14}",
        "  " + "-" * 32,
        f"  {'Transportation':<18}{breakdown.transportation:>14.2f}",
        f"  {'Energy':<18}{breakdown.energy:>14.2f}",
        f"  {'Lifestyle':<18}{breakdown.lifestyle:>14.2f}",
        "  " + "-" * 32,
        f"  {'Total':<18}{breakdown.total:>14.2f}",
    ]
    return "\n".join(lines)


def format_assessment(assessment: FootprintAssessment) -> str:
    """Format the benchmark assessment that accompanies a breakdown."""
    severity = assessment.severity.value.replace("_", " ").title()
    cmp = assessment.comparison
    if cmp.direction == "equal":
        cmp_line = f"Equal to the {assessment.average_tons:.1f} t average footprint"
    else:
        cmp_line = (
            f"{cmp.difference_tons:.1f} tons {cmp.direction} the "
            f"{assessment.average_tons:.1f} t average footprint"
        )

    shares = ", ".join(
        f"{category} {share}%" if share is not None else f"{category} n/a"
        for category, share in assessment.category_shares.items()
    )

    gap = assessment.gap_to_target_tons
    if not math.isfinite(gap):
        gap_note = "gap n/a"
    elif gap > 0:
        gap_note = f"{gap:.1f} tons to go"
    else:
        gap_note = "target met"

    eq = assessment.equivalents
    lines = [
        f"  Impact level: {severity}",
        f"  {cmp_line}",
        f"  Scale (0-30 t): {_fmt_pct(eq.scale_position_pct, 0)}",
        f"  Share of total: {shares}",
        f"  Equivalent to: {_fmt_count(eq.lbs_co2e, 'lbs CO2e')}, "
        f"{_fmt_count(eq.trees_to_offset, 'trees to offset annually')}, "
        f"{_fmt_count(eq.gasoline_gallons, 'gallons of gasoline')}",
        f"  Global target: {assessment.global_target_tons:.1f} tons per person by 2030 "
        f"({gap_note})",
    ]
    return "\n".join(lines)


# ── Recommendations ───────────────────────────────────────────────────────────


def format_recommendations_table(
    recommendations: Sequence[Recommendation],
    breakdown:       EmissionsBreakdown,
    show_steps:      bool = False,
) -> str:
    """Format ranked recommendations as an ASCII table.

    Example::

        Rank  Recommendation               Save t  Reduce  Impact  Effort  Cost
        -------------------------------------------------------------------
           1  Install solar panels            6.8   34.8%  high    hard    high

    Args:
        recommendations: Ranked list from ``recommend()``.
        breakdown:       The breakdown the list was derived from.
        show_steps:      Print each recommendation's action steps under it.

    Returns:
        Multi-line string.
    """
    if not recommendations:
        return "  No recommendations."

    header = (
        f"  {'Rank':>4}  {'Recommendation':<36} {'Save t':>6}  {'Reduce':>6}  "
        f"{'Impact':<6}  {'Effort':<6}  {'Cost':<6}"
    )
    lines = [header, "  " + _RULE + "-" * 14]
    for rank, rec in enumerate(recommendations, start=1):
        pct = reduction_percentage(rec, breakdown)
        lines.append(
            f"  {rank:>4}  {rec.title[:36]:<36} {rec.savings:>6.1f}  {_fmt_pct(pct):>6}  "
            f"{rec.impact.value:<6}  {rec.difficulty.value:<6}  {rec.cost.value:<6}"
        )
        if show_steps:
            for step_no, step in enumerate(rec.action_steps, start=1):
                lines.append(f"          {step_no}. {step}")
    return "\n".join(lines)


def format_reduction_summary(summary: ReductionSummary) -> str:
    """Format the reduction-potential block and the quick wins list."""
    lines = [
        f"  Reduction potential: {summary.total_savings:.1f} tons "
        f"({_fmt_pct(summary.overall_reduction_pct, 0)} of current footprint)",
        f"  Recommendations:     {summary.count}",
        "",
        "  Quick wins:",
    ]
    if not summary.quick_wins:
        lines.append("    (none)")
    for rec in summary.quick_wins:
        lines.append(f"    - {rec.title}: save {rec.savings:.1f} tons CO2/year")
    return "\n".join(lines)
