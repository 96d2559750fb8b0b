"""
Tests for footprint_estimator/estimation/emissions.py.

What we test
------------
estimate():
  - Canonical household reproduces 6.50 / 9.72 / 3.36 / 19.58.
  - All-zero input with a vegan diet gives 0 / 0 / 1.5 / 1.5.
  - Deterministic: identical inputs give identical outputs.
  - total is rounded from the unrounded sum, so it can differ from the sum
    of the rounded categories by up to 0.01.
  - Zero car_efficiency yields non-finite transportation and total
    without raising.

estimate_components():
  - Each per-activity formula.

diet_emissions():
  - Lookup table values; unrecognised diets fall back to 3.3.
"""

from __future__ import annotations

import math

import pytest

from footprint_estimator.estimation.emissions import (
    diet_emissions,
    estimate,
    estimate_components,
)
from footprint_estimator.models.activity import ActivityInput
from footprint_estimator.taxonomy.activity_taxonomy import Diet


def _activity(**flat) -> ActivityInput:
    return ActivityInput.from_flat(flat)


class TestReferenceHouseholds:
    def test_canonical_household(self, reference_activity):
        b = estimate(reference_activity)
        assert b.transportation == 6.50
        assert b.energy == 9.72
        assert b.lifestyle == 3.36
        assert b.total == 19.58

    def test_all_zero_vegan(self):
        b = estimate(_activity(carEfficiency=25, diet="vegan"))
        assert b.transportation == 0.0
        assert b.energy == 0.0
        assert b.lifestyle == 1.5
        assert b.total == 1.5

    def test_deterministic(self, reference_activity):
        assert estimate(reference_activity) == estimate(reference_activity)

    def test_input_not_modified(self, reference_activity):
        before = reference_activity.model_dump()
        estimate(reference_activity)
        assert reference_activity.model_dump() == before


class TestRounding:
    def test_total_rounded_independently_of_categories(self):
        # 0.004 + 0.004 + 1.504 = 1.512 -> 1.51, but the rounded categories
        # are 0.00 + 0.00 + 1.50 = 1.50.
        b = estimate(_activity(
            publicTransportMiles=10, heatingCostPerYear=2, diet="vegan", wasteBagsPerWeek=2,
        ))
        assert b.transportation == 0.0
        assert b.energy == 0.0
        assert b.lifestyle == 1.5
        assert b.total == 1.51
        assert b.total != b.rounded_category_sum

    def test_total_within_one_hundredth_of_rounded_sum(self, reference_activity):
        for activity in (
            reference_activity,
            _activity(publicTransportMiles=10, heatingCostPerYear=2, wasteBagsPerWeek=2),
            _activity(carMiles=777, carEfficiency=31, electricityKwhPerMonth=333),
        ):
            b = estimate(activity)
            assert abs(b.total - b.rounded_category_sum) <= 0.01 + 1e-9

    def test_values_have_two_decimals(self):
        b = estimate(_activity(carMiles=12345, carEfficiency=27, gasThermsPerMonth=13))
        for value in (b.transportation, b.energy, b.lifestyle, b.total):
            assert round(value, 2) == value


class TestComponents:
    def test_car_formula(self):
        c = estimate_components(_activity(carMiles=12000, carEfficiency=25))
        assert c.car == pytest.approx(12000 / 25 * 19.6 / 2000)
        assert c.car == pytest.approx(4.704)

    def test_public_transport_and_flights(self):
        c = estimate_components(_activity(publicTransportMiles=2000, flightsPerYear=3))
        assert c.public_transport == pytest.approx(0.8)
        assert c.flights == pytest.approx(1.5)

    def test_energy_formulas(self):
        c = estimate_components(_activity(
            electricityKwhPerMonth=900, gasThermsPerMonth=50, heatingCostPerYear=1200,
        ))
        assert c.electricity == pytest.approx(4.32)
        assert c.gas == pytest.approx(3.0)
        assert c.heating == pytest.approx(2.4)
        assert c.energy == pytest.approx(9.72)

    def test_lifestyle_formulas(self):
        c = estimate_components(_activity(
            diet="vegetarian", shoppingThousandsPerYear=5, wasteBagsPerWeek=3,
        ))
        assert c.diet == 2.5
        assert c.shopping == pytest.approx(0.05)
        assert c.waste == pytest.approx(0.006)

    def test_total_is_sum_of_categories(self, reference_activity):
        c = estimate_components(reference_activity)
        assert c.total == pytest.approx(c.transportation + c.energy + c.lifestyle)


class TestDietTable:
    @pytest.mark.parametrize(
        "diet, expected",
        [("vegan", 1.5), ("vegetarian", 2.5), ("mixed", 3.3), ("meat_heavy", 4.5)],
    )
    def test_known_diets(self, diet, expected):
        assert diet_emissions(diet) == expected
        assert estimate(_activity(diet=diet)).lifestyle == expected

    def test_enum_member_lookup(self):
        assert diet_emissions(Diet.MEAT_HEAVY) == 4.5

    def test_unknown_diet_defaults_to_mixed(self):
        assert diet_emissions("carnivore") == 3.3
        assert estimate(_activity(diet="carnivore")).lifestyle == 3.3

    def test_lookup_is_case_sensitive(self):
        assert diet_emissions("VEGAN") == 3.3


class TestDegenerateInputs:
    def test_zero_efficiency_gives_infinite_transportation(self):
        b = estimate(_activity(carMiles=1000, carEfficiency=0))
        assert math.isinf(b.transportation)
        assert math.isinf(b.total)
        assert b.energy == 0.0

    def test_zero_miles_zero_efficiency_gives_nan(self):
        b = estimate(_activity(carMiles=0, carEfficiency=0))
        assert math.isnan(b.transportation)
        assert math.isnan(b.total)

    def test_negative_values_flow_through(self):
        b = estimate(_activity(flightsPerYear=-2, diet="vegan"))
        assert b.transportation == -1.0
        assert b.total == 0.5
