"""
Recommendation catalog: the single guard table for reduction actions.

Each ``RecommendationTemplate`` couples the static text of an action
(title, description, action steps) and its tags with two pure functions:

  - ``guard(activity)``              → whether the action applies
  - ``savings(activity, breakdown)`` → estimated tons CO₂e saved per year

Guards read only from the activity record. Savings scale with the rounded
breakdown values, except ``reduce-flights`` (per flight) and the two
fixed-savings entries.

Guard table (generation order)
------------------------------
    id                  guard                              savings
    ------------------  ---------------------------------  -------------------
    reduce-driving      car_miles > 10000                  transportation*0.20
    upgrade-car         car_efficiency < 30                transportation*0.50
    reduce-flights      flights_per_year > 2               flights*0.25
    reduce-electricity  electricity_kwh_per_month > 800    energy*0.15
    solar-panels        always                             energy*0.70
    insulation          heating_cost_per_year > 1000       energy*0.25
    reduce-meat         diet == "meat_heavy"               1.2
    reduce-waste        always                             0.5
    conscious-shopping  shopping_thousands_per_year > 8    lifestyle*0.30
    carbon-offset       always                             total*0.10

``CATALOG`` is a tuple and every template is frozen: the table is a
process-wide constant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from footprint_estimator.models.activity import ActivityInput
from footprint_estimator.models.breakdown import EmissionsBreakdown
from footprint_estimator.taxonomy.activity_taxonomy import (
    Cost,
    Difficulty,
    Diet,
    EmissionCategory,
    Impact,
)

Guard = Callable[[ActivityInput], bool]
SavingsFn = Callable[[ActivityInput, EmissionsBreakdown], float]

HIGH_MILEAGE_MILES = 10_000
LOW_EFFICIENCY_MPG = 30
FREQUENT_FLYER_FLIGHTS = 2
HIGH_ELECTRICITY_KWH = 800
HIGH_HEATING_COST = 1_000
HIGH_SHOPPING_THOUSANDS = 8

REDUCE_MEAT_SAVINGS_TONS = 1.2
REDUCE_WASTE_SAVINGS_TONS = 0.5
TONS_SAVED_PER_FLIGHT = 0.25


@dataclass(frozen=True)
class RecommendationTemplate:
    """Static definition of one reduction action."""

    id:           str
    title:        str
    description:  str
    category:     EmissionCategory
    impact:       Impact
    difficulty:   Difficulty
    cost:         Cost
    action_steps: tuple[str, ...]
    guard:        Guard
    savings:      SavingsFn


def _always(activity: ActivityInput) -> bool:
    return True


CATALOG: tuple[RecommendationTemplate, ...] = (
    # ── Transportation ────────────────────────────────────────────────────────
    RecommendationTemplate(
        id="reduce-driving",
        title="Reduce driving by 20%",
        description=(
            "Work from home, combine trips, or use alternative transportation "
            "for short distances."
        ),
        category=EmissionCategory.TRANSPORTATION,
        impact=Impact.HIGH,
        difficulty=Difficulty.MEDIUM,
        cost=Cost.FREE,
        action_steps=(
            "Negotiate one or two remote working days a week.",
            "Batch errands into a single weekly trip.",
            "Walk or cycle for journeys under two miles.",
            "Set up a carpool for regular commutes.",
        ),
        guard=lambda a: a.transportation.car_miles > HIGH_MILEAGE_MILES,
        savings=lambda a, b: b.transportation * 0.2,
    ),
    RecommendationTemplate(
        id="upgrade-car",
        title="Upgrade to a fuel-efficient vehicle",
        description="Consider a hybrid or electric vehicle for your next car purchase.",
        category=EmissionCategory.TRANSPORTATION,
        impact=Impact.HIGH,
        difficulty=Difficulty.HARD,
        cost=Cost.HIGH,
        action_steps=(
            "Compare hybrid and electric models that fit your typical trips.",
            "Check available purchase incentives and tax credits.",
            "Plan home or workplace charging before switching to electric.",
            "Keep tyres inflated and servicing current on your current car meanwhile.",
        ),
        guard=lambda a: a.transportation.car_efficiency < LOW_EFFICIENCY_MPG,
        savings=lambda a, b: b.transportation * 0.5,
    ),
    RecommendationTemplate(
        id="reduce-flights",
        title="Reduce air travel",
        description=(
            "Choose destinations closer to home or extend trips to reduce frequency."
        ),
        category=EmissionCategory.TRANSPORTATION,
        impact=Impact.HIGH,
        difficulty=Difficulty.MEDIUM,
        cost=Cost.FREE,
        action_steps=(
            "Replace short-haul flights with train journeys where possible.",
            "Combine several short trips into one longer stay.",
            "Use video calls instead of flying to meetings.",
            "Fly economy and direct when flying cannot be avoided.",
        ),
        guard=lambda a: a.transportation.flights_per_year > FREQUENT_FLYER_FLIGHTS,
        savings=lambda a, b: a.transportation.flights_per_year * TONS_SAVED_PER_FLIGHT,
    ),
    # ── Energy ────────────────────────────────────────────────────────────────
    RecommendationTemplate(
        id="reduce-electricity",
        title="Reduce electricity consumption",
        description="Use LED bulbs, unplug devices, and adjust thermostat settings.",
        category=EmissionCategory.ENERGY,
        impact=Impact.MEDIUM,
        difficulty=Difficulty.EASY,
        cost=Cost.LOW,
        action_steps=(
            "Replace remaining incandescent bulbs with LEDs.",
            "Switch devices off at the wall instead of leaving them on standby.",
            "Lower the thermostat by one degree.",
            "Run washing machines and dishwashers on full loads only.",
        ),
        guard=lambda a: a.energy.electricity_kwh_per_month > HIGH_ELECTRICITY_KWH,
        savings=lambda a, b: b.energy * 0.15,
    ),
    RecommendationTemplate(
        id="solar-panels",
        title="Install solar panels",
        description="Generate clean energy and reduce dependence on grid electricity.",
        category=EmissionCategory.ENERGY,
        impact=Impact.HIGH,
        difficulty=Difficulty.HARD,
        cost=Cost.HIGH,
        action_steps=(
            "Get a roof suitability and shading assessment.",
            "Request quotes from at least three certified installers.",
            "Check local grants, rebates, and feed-in tariffs.",
            "Alternatively switch to a renewable electricity tariff.",
        ),
        guard=_always,
        savings=lambda a, b: b.energy * 0.7,
    ),
    RecommendationTemplate(
        id="insulation",
        title="Improve home insulation",
        description="Better insulation reduces heating and cooling energy needs.",
        category=EmissionCategory.ENERGY,
        impact=Impact.MEDIUM,
        difficulty=Difficulty.MEDIUM,
        cost=Cost.MEDIUM,
        action_steps=(
            "Book a home energy audit to find the largest heat losses.",
            "Seal draughts around doors and windows.",
            "Top up loft insulation.",
            "Insulate hot water pipes and the tank.",
        ),
        guard=lambda a: a.energy.heating_cost_per_year > HIGH_HEATING_COST,
        savings=lambda a, b: b.energy * 0.25,
    ),
    # ── Lifestyle ─────────────────────────────────────────────────────────────
    RecommendationTemplate(
        id="reduce-meat",
        title="Reduce meat consumption",
        description=(
            "Try meatless meals 2-3 times per week to lower your dietary footprint."
        ),
        category=EmissionCategory.LIFESTYLE,
        impact=Impact.MEDIUM,
        difficulty=Difficulty.EASY,
        cost=Cost.FREE,
        action_steps=(
            "Plan two or three meat-free dinners each week.",
            "Swap beef and lamb for poultry or legumes.",
            "Try plant-based alternatives for milk and mince.",
        ),
        guard=lambda a: a.lifestyle.diet == Diet.MEAT_HEAVY,
        savings=lambda a, b: REDUCE_MEAT_SAVINGS_TONS,
    ),
    RecommendationTemplate(
        id="reduce-waste",
        title="Minimize waste generation",
        description="Buy less, reuse items, and recycle properly to reduce waste impact.",
        category=EmissionCategory.LIFESTYLE,
        impact=Impact.LOW,
        difficulty=Difficulty.EASY,
        cost=Cost.FREE,
        action_steps=(
            "Compost food scraps.",
            "Carry reusable bags, bottles, and cups.",
            "Check local rules and sort recycling correctly.",
            "Repair or donate items before throwing them away.",
        ),
        guard=_always,
        savings=lambda a, b: REDUCE_WASTE_SAVINGS_TONS,
    ),
    RecommendationTemplate(
        id="conscious-shopping",
        title="Shop more consciously",
        description="Buy local, choose sustainable brands, and reduce impulse purchases.",
        category=EmissionCategory.LIFESTYLE,
        impact=Impact.MEDIUM,
        difficulty=Difficulty.MEDIUM,
        cost=Cost.FREE,
        action_steps=(
            "Wait 48 hours before any non-essential purchase.",
            "Buy second-hand or refurbished first.",
            "Prefer local and certified sustainable brands.",
        ),
        guard=lambda a: a.lifestyle.shopping_thousands_per_year > HIGH_SHOPPING_THOUSANDS,
        savings=lambda a, b: b.lifestyle * 0.3,
    ),
    RecommendationTemplate(
        id="carbon-offset",
        title="Purchase carbon offsets",
        description=(
            "Support verified carbon offset projects for emissions you cannot reduce."
        ),
        category=EmissionCategory.LIFESTYLE,
        impact=Impact.MEDIUM,
        difficulty=Difficulty.EASY,
        cost=Cost.LOW,
        action_steps=(
            "Work out the emissions you cannot yet avoid.",
            "Choose projects certified by a recognised standard.",
            "Review and renew offsets once a year.",
        ),
        guard=_always,
        savings=lambda a, b: b.total * 0.1,
    ),
)
