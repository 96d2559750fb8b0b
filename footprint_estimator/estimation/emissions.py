"""
Emissions estimator: maps an ``ActivityInput`` to an ``EmissionsBreakdown``.

Single pass of arithmetic, no state, no I/O. The estimator is total: it
never raises for any float input.

Formulas (tons CO₂e per year)
-----------------------------
    car             = car_miles / car_efficiency * 19.6 / 2000
    public_transport= public_transport_miles * 0.0004
    flights         = flights_per_year * 0.5
    electricity     = electricity_kwh_per_month * 12 * 0.0004
    gas             = gas_therms_per_month * 12 * 0.005
    heating         = heating_cost_per_year * 0.002
    diet            = DIET_FACTORS[diet], 3.3 when unrecognised
    shopping        = shopping_thousands_per_year * 0.01
    waste           = waste_bags_per_week * 0.002

    transportation  = car + public_transport + flights
    energy          = electricity + gas + heating
    lifestyle       = diet + shopping + waste
    total           = transportation + energy + lifestyle

Rounding
--------
Each of the four outputs is rounded to 2 decimals from its own unrounded
value. ``total`` is NOT re-derived from the rounded categories, so
``total`` and ``transportation + energy + lifestyle`` can disagree in the
last place. Operand order in every formula is fixed; reordering changes
the floating-point result.

Preconditions
-------------
``car_efficiency`` must be > 0. Zero yields ``inf`` (or ``nan`` when
``car_miles`` is also zero) which propagates into ``transportation`` and
``total`` untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from footprint_estimator.estimation import factors as f
from footprint_estimator.models.activity import ActivityInput
from footprint_estimator.models.breakdown import EmissionsBreakdown
from footprint_estimator.utils.numbers import round_half_up, safe_ratio

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmissionComponents:
    """Unrounded per-activity contributions, in tons CO₂e per year."""

    car:              float
    public_transport: float
    flights:          float
    electricity:      float
    gas:              float
    heating:          float
    diet:             float
    shopping:         float
    waste:            float

    @property
    def transportation(self) -> float:
        return self.car + self.public_transport + self.flights

    @property
    def energy(self) -> float:
        return self.electricity + self.gas + self.heating

    @property
    def lifestyle(self) -> float:
        return self.diet + self.shopping + self.waste

    @property
    def total(self) -> float:
        return self.transportation + self.energy + self.lifestyle


def diet_emissions(diet: str) -> float:
    """Annual diet emissions for a profile; unknown profiles use the mixed factor."""
    return f.DIET_FACTORS.get(diet, f.DEFAULT_DIET_FACTOR)


def estimate_components(activity: ActivityInput) -> EmissionComponents:
    """Compute every per-activity contribution without rounding.

    Args:
        activity: The submitted activity record.

    Returns:
        ``EmissionComponents`` with nine unrounded values.
    """
    t = activity.transportation
    e = activity.energy
    life = activity.lifestyle

    gallons = safe_ratio(t.car_miles, t.car_efficiency)

    return EmissionComponents(
        car=gallons * f.LB_CO2_PER_GALLON_GASOLINE / f.LB_PER_TON,
        public_transport=t.public_transport_miles * f.TONS_PER_PUBLIC_TRANSPORT_MILE,
        flights=t.flights_per_year * f.TONS_PER_FLIGHT,
        electricity=e.electricity_kwh_per_month * f.MONTHS_PER_YEAR * f.TONS_PER_KWH,
        gas=e.gas_therms_per_month * f.MONTHS_PER_YEAR * f.TONS_PER_THERM,
        heating=e.heating_cost_per_year * f.TONS_PER_HEATING_CURRENCY_UNIT,
        diet=diet_emissions(life.diet),
        shopping=life.shopping_thousands_per_year * f.TONS_PER_SHOPPING_THOUSAND,
        waste=life.waste_bags_per_week * f.TONS_PER_WASTE_BAG,
    )


def estimate(activity: ActivityInput) -> EmissionsBreakdown:
    """Estimate the annual emissions breakdown for one activity record.

    Args:
        activity: The submitted activity record. Not modified.

    Returns:
        ``EmissionsBreakdown`` with each value rounded to 2 decimals.
    """
    components = estimate_components(activity)

    breakdown = EmissionsBreakdown(
        transportation=round_half_up(components.transportation, 2),
        energy=round_half_up(components.energy, 2),
        lifestyle=round_half_up(components.lifestyle, 2),
        total=round_half_up(components.total, 2),
    )
    logger.debug(
        "Estimated footprint: transportation=%s energy=%s lifestyle=%s total=%s",
        breakdown.transportation, breakdown.energy, breakdown.lifestyle, breakdown.total,
    )
    return breakdown
