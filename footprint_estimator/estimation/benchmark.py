"""
Footprint benchmark: grades a breakdown against typical-household figures.

Severity bands (tons CO₂e per year)
-----------------------------------
    total < 10   → low
    total < 16   → moderate
    total < 25   → high
    otherwise    → very_high

The comparison reference is the average annual footprint (16 t by default)
and the headline goal is the 2030 per-person target (2.3 t by default).
Both are passed in by the caller, normally from ``BenchmarkConfig``.

Category shares are whole percentages of ``total`` rounded half up. A zero
total has no meaningful shares, so every share is ``None`` in that case.

Impact equivalents restate the total in everyday units, each rounded half
up to a whole number:

    lbs CO₂e          total * 2204
    trees to offset   total / 0.039   (tons absorbed per tree per year)
    gasoline gallons  total / 0.411

plus the position of the total on a 0-30 t scale, as a percentage clamped
to [0, 100]. A non-finite total yields ``None`` for every figure.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from footprint_estimator.models.breakdown import EmissionsBreakdown
from footprint_estimator.taxonomy.activity_taxonomy import EmissionCategory, SeverityLevel

DEFAULT_AVERAGE_FOOTPRINT_TONS = 16.0
DEFAULT_GLOBAL_TARGET_TONS = 2.3

LBS_PER_METRIC_TON = 2204
TONS_ABSORBED_PER_TREE = 0.039
TONS_PER_GALLON_GASOLINE = 0.411
SCALE_MAX_TONS = 30.0

# (upper bound exclusive, level), evaluated in order
_SEVERITY_BANDS: tuple[tuple[float, SeverityLevel], ...] = (
    (10.0, SeverityLevel.LOW),
    (16.0, SeverityLevel.MODERATE),
    (25.0, SeverityLevel.HIGH),
)


@dataclass(frozen=True)
class AverageComparison:
    """Where a total sits relative to the average footprint.

    Attributes:
        direction:       ``"below"``, ``"above"``, or ``"equal"``.
        difference_tons: Absolute gap between total and average.
    """

    direction:       str
    difference_tons: float


@dataclass(frozen=True)
class ImpactEquivalents:
    """The annual total restated in everyday units.

    Attributes:
        lbs_co2e:           Total in pounds of CO₂e.
        trees_to_offset:    Trees needed to absorb the total in one year.
        gasoline_gallons:   Gallons of gasoline with the same emissions.
        scale_position_pct: Position of the total on the 0-30 t scale.
    """

    lbs_co2e:           int | None
    trees_to_offset:    int | None
    gasoline_gallons:   int | None
    scale_position_pct: float | None


@dataclass(frozen=True)
class FootprintAssessment:
    """Everything a results view needs beyond the raw breakdown."""

    breakdown:          EmissionsBreakdown
    severity:           SeverityLevel
    comparison:         AverageComparison
    category_shares:    dict[str, int | None]
    equivalents:        ImpactEquivalents
    average_tons:       float
    global_target_tons: float

    @property
    def gap_to_target_tons(self) -> float:
        return self.breakdown.total - self.global_target_tons


def severity_level(total: float) -> SeverityLevel:
    """Grade an annual total into a ``SeverityLevel``."""
    for upper, level in _SEVERITY_BANDS:
        if total < upper:
            return level
    return SeverityLevel.VERY_HIGH


def compare_to_average(
    total: float,
    average: float = DEFAULT_AVERAGE_FOOTPRINT_TONS,
) -> AverageComparison:
    """Compare a total against the average footprint."""
    if total < average:
        direction = "below"
    elif total > average:
        direction = "above"
    else:
        direction = "equal"
    return AverageComparison(direction=direction, difference_tons=abs(total - average))


def category_shares(breakdown: EmissionsBreakdown) -> dict[str, int | None]:
    """Whole-percent share of ``total`` for each category.

    Returns:
        Dict keyed by category value (``"transportation"`` etc.). Values are
        ``None`` when ``total`` is zero or not finite.
    """
    total = breakdown.total
    shares: dict[str, int | None] = {}
    for category in EmissionCategory:
        if total == 0 or not math.isfinite(total):
            shares[category.value] = None
            continue
        pct = breakdown.category_value(category) / total * 100
        shares[category.value] = _round_whole(pct)
    return shares


def _round_whole(value: float) -> int:
    return math.floor(value + 0.5)


def impact_equivalents(total: float) -> ImpactEquivalents:
    """Restate an annual total (tons CO₂e) in everyday units."""
    if not math.isfinite(total):
        return ImpactEquivalents(None, None, None, None)
    return ImpactEquivalents(
        lbs_co2e=_round_whole(total * LBS_PER_METRIC_TON),
        trees_to_offset=_round_whole(total / TONS_ABSORBED_PER_TREE),
        gasoline_gallons=_round_whole(total / TONS_PER_GALLON_GASOLINE),
        scale_position_pct=min(max(total / SCALE_MAX_TONS * 100, 0.0), 100.0),
    )


def assess(
    breakdown:          EmissionsBreakdown,
    average_tons:       float = DEFAULT_AVERAGE_FOOTPRINT_TONS,
    global_target_tons: float = DEFAULT_GLOBAL_TARGET_TONS,
) -> FootprintAssessment:
    """Build the full benchmark assessment for a breakdown."""
    return FootprintAssessment(
        breakdown=breakdown,
        severity=severity_level(breakdown.total),
        comparison=compare_to_average(breakdown.total, average_tons),
        category_shares=category_shares(breakdown),
        equivalents=impact_equivalents(breakdown.total),
        average_tons=average_tons,
        global_target_tons=global_target_tons,
    )
