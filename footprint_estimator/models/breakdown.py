"""
Emissions breakdown: the four-number output of the estimator.

All values are metric tons CO₂-equivalent per year, each rounded to two
decimals on its own. ``total`` is the rounded *unrounded* grand total, not
the sum of the three rounded categories, so it may differ from
``transportation + energy + lifestyle`` by a cent or two of a ton.
``rounded_category_sum`` exposes that sum for callers that need to show it.

The model is frozen and carries no validators: a zero ``car_efficiency``
upstream legitimately produces ``inf``/``nan`` here.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from footprint_estimator.taxonomy.activity_taxonomy import EmissionCategory


class EmissionsBreakdown(BaseModel):
    """Per-category and total annual emissions.

    Attributes:
        transportation: Car, public transport, and flight emissions.
        energy: Electricity, gas, and heating emissions.
        lifestyle: Diet, shopping, and waste emissions.
        total: Grand total, rounded independently of the categories.
    """

    model_config = ConfigDict(frozen=True)

    transportation: float
    energy: float
    lifestyle: float
    total: float

    def category_value(self, category: EmissionCategory | str) -> float:
        """Return the rounded value for one category."""
        return float(getattr(self, EmissionCategory(category).value))

    @property
    def rounded_category_sum(self) -> float:
        """Sum of the three already-rounded category values."""
        return self.transportation + self.energy + self.lifestyle
