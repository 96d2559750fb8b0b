"""Tests for ActivityInput, EmissionsBreakdown and Recommendation models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from footprint_estimator.models.activity import (
    DEFAULT_CAR_EFFICIENCY_MPG,
    ActivityInput,
    TransportationInput,
)
from footprint_estimator.models.breakdown import EmissionsBreakdown
from footprint_estimator.models.recommendation import Recommendation
from footprint_estimator.taxonomy.activity_taxonomy import (
    Cost,
    Difficulty,
    EmissionCategory,
    Impact,
)


class TestActivityInput:
    def test_defaults(self):
        a = ActivityInput()
        assert a.transportation.car_miles == 0.0
        assert a.transportation.car_efficiency == DEFAULT_CAR_EFFICIENCY_MPG
        assert a.energy.heating_cost_per_year == 0.0
        assert a.lifestyle.diet == "mixed"

    def test_from_flat_camel_case(self, reference_activity):
        a = reference_activity
        assert a.transportation.car_miles == 12000.0
        assert a.transportation.public_transport_miles == 2000.0
        assert a.energy.electricity_kwh_per_month == 900.0
        assert a.lifestyle.waste_bags_per_week == 3.0

    def test_from_flat_snake_case(self):
        a = ActivityInput.from_flat({"car_miles": 500, "gas_therms_per_month": 4})
        assert a.transportation.car_miles == 500.0
        assert a.energy.gas_therms_per_month == 4.0

    def test_from_flat_unknown_key_raises(self):
        with pytest.raises(ValueError, match="carMilez"):
            ActivityInput.from_flat({"carMilez": 10})

    def test_non_numeric_value_raises(self):
        with pytest.raises(ValidationError):
            ActivityInput.from_flat({"carMiles": "lots"})

    def test_negative_values_are_not_rejected(self):
        # Range checks belong to the input boundary, not the model.
        a = ActivityInput.from_flat({"carMiles": -5, "carEfficiency": 0})
        assert a.transportation.car_miles == -5.0
        assert a.transportation.car_efficiency == 0.0

    def test_unknown_diet_is_kept_verbatim(self):
        a = ActivityInput.from_flat({"diet": "pescatarian"})
        assert a.lifestyle.diet == "pescatarian"

    def test_frozen(self, reference_activity):
        with pytest.raises(ValidationError):
            reference_activity.transportation.car_miles = 1.0

    def test_extra_section_field_rejected(self):
        with pytest.raises(ValidationError):
            TransportationInput(car_miles=1, bicycle_miles=2)

    def test_to_flat_uses_camel_case_keys(self, reference_activity):
        flat = reference_activity.to_flat()
        assert flat["carMiles"] == 12000.0
        assert flat["diet"] == "mixed"
        assert "car_miles" not in flat
        assert len(flat) == 10
        assert ActivityInput.from_flat(flat) == reference_activity


class TestEmissionsBreakdown:
    def test_category_value(self):
        b = EmissionsBreakdown(transportation=1.0, energy=2.0, lifestyle=3.0, total=6.0)
        assert b.category_value(EmissionCategory.ENERGY) == 2.0
        assert b.category_value("lifestyle") == 3.0

    def test_rounded_category_sum(self):
        b = EmissionsBreakdown(transportation=0.0, energy=0.0, lifestyle=1.5, total=1.51)
        assert b.rounded_category_sum == pytest.approx(1.5)
        assert b.total != b.rounded_category_sum

    def test_accepts_non_finite_values(self):
        b = EmissionsBreakdown(
            transportation=float("inf"), energy=0.0, lifestyle=1.5, total=float("inf"),
        )
        assert b.total == float("inf")


class TestRecommendation:
    def _rec(self, **overrides) -> Recommendation:
        fields = dict(
            id="reduce-waste",
            title="Minimize waste generation",
            description="Buy less.",
            category=EmissionCategory.LIFESTYLE,
            impact=Impact.LOW,
            savings=0.5,
            difficulty=Difficulty.EASY,
            cost=Cost.FREE,
            action_steps=("Compost food scraps.",),
        )
        fields.update(overrides)
        return Recommendation(**fields)

    def test_valid_construction(self):
        r = self._rec()
        assert r.category == EmissionCategory.LIFESTYLE
        assert r.action_steps == ("Compost food scraps.",)

    def test_string_tags_coerced_to_enums(self):
        r = self._rec(impact="high", difficulty="hard", cost="medium", category="energy")
        assert r.impact is Impact.HIGH
        assert r.difficulty is Difficulty.HARD

    def test_invalid_tag_raises(self):
        with pytest.raises(ValidationError):
            self._rec(impact="enormous")

    def test_empty_id_raises(self):
        with pytest.raises(ValidationError, match="must not be empty"):
            self._rec(id="   ")

    def test_is_quick_win(self):
        assert self._rec().is_quick_win is True
        assert self._rec(difficulty="medium").is_quick_win is False
