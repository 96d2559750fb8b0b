"""
Activity input model: one submitted household footprint assessment.

``ActivityInput`` groups the self-reported figures in three sections that
mirror the emission categories:

  - ``transportation`` → annual driving, public transport, and flights
  - ``energy``         → monthly electricity and gas, annual heating spend
  - ``lifestyle``      → diet profile, annual shopping, weekly waste

The models are frozen value objects with no identity beyond the call they
are passed to. They deliberately do NOT range-check their numbers: the
estimator is total over any float, and non-negativity / ``car_efficiency > 0``
are enforced at the input boundary (see ``ingestion.activity_file``).

``ActivityInput.from_flat()`` accepts the flat field layout used by form
payloads, in either camelCase (``carMiles``) or snake_case (``car_miles``).
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

from footprint_estimator.taxonomy.activity_taxonomy import Diet

DEFAULT_CAR_EFFICIENCY_MPG = 25.0

# camelCase payload key → (section, field)
_CAMEL_FIELDS: dict[str, tuple[str, str]] = {
    "carMiles":                 ("transportation", "car_miles"),
    "carEfficiency":            ("transportation", "car_efficiency"),
    "publicTransportMiles":     ("transportation", "public_transport_miles"),
    "flightsPerYear":           ("transportation", "flights_per_year"),
    "electricityKwhPerMonth":   ("energy", "electricity_kwh_per_month"),
    "gasThermsPerMonth":        ("energy", "gas_therms_per_month"),
    "heatingCostPerYear":       ("energy", "heating_cost_per_year"),
    "diet":                     ("lifestyle", "diet"),
    "shoppingThousandsPerYear": ("lifestyle", "shopping_thousands_per_year"),
    "wasteBagsPerWeek":         ("lifestyle", "waste_bags_per_week"),
}
_FLAT_FIELDS: dict[str, tuple[str, str]] = {
    **_CAMEL_FIELDS,
    **{field: (section, field) for section, field in _CAMEL_FIELDS.values()},
}


class TransportationInput(BaseModel):
    """Annual travel figures.

    Attributes:
        car_miles: Miles driven per year.
        car_efficiency: Vehicle fuel economy in miles per gallon.
        public_transport_miles: Miles travelled by bus/train per year.
        flights_per_year: Number of flights taken per year.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    car_miles: float = 0.0
    car_efficiency: float = DEFAULT_CAR_EFFICIENCY_MPG
    public_transport_miles: float = 0.0
    flights_per_year: float = 0.0


class EnergyInput(BaseModel):
    """Household energy figures.

    Attributes:
        electricity_kwh_per_month: Average monthly electricity use (kWh).
        gas_therms_per_month: Average monthly natural gas use (therms).
        heating_cost_per_year: Annual heating spend in currency units.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    electricity_kwh_per_month: float = 0.0
    gas_therms_per_month: float = 0.0
    heating_cost_per_year: float = 0.0


class LifestyleInput(BaseModel):
    """Consumption habits.

    ``diet`` is a plain string so that unrecognised profiles reach the
    estimator intact (it falls back to the mixed-diet factor).

    Attributes:
        diet: One of the ``Diet`` values, or any other string.
        shopping_thousands_per_year: Annual discretionary spend, in thousands.
        waste_bags_per_week: Bags of household rubbish per week.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    diet: str = Diet.MIXED.value
    shopping_thousands_per_year: float = 0.0
    waste_bags_per_week: float = 0.0


class ActivityInput(BaseModel):
    """A complete activity record, as passed to ``estimate()`` and ``recommend()``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    transportation: TransportationInput = TransportationInput()
    energy: EnergyInput = EnergyInput()
    lifestyle: LifestyleInput = LifestyleInput()

    @classmethod
    def from_flat(cls, data: Mapping[str, Any]) -> "ActivityInput":
        """Build an ``ActivityInput`` from a flat field mapping.

        Unknown keys raise ``ValueError`` so typos in payloads are not
        silently replaced by defaults.

        Args:
            data: Mapping of flat field name → value.

        Returns:
            Validated ``ActivityInput``.

        Raises:
            ValueError: If ``data`` contains an unrecognised key.
            pydantic.ValidationError: If a value cannot be coerced to its type.
        """
        sections: dict[str, dict[str, Any]] = {
            "transportation": {}, "energy": {}, "lifestyle": {},
        }
        unknown: list[str] = []
        for key, value in data.items():
            target = _FLAT_FIELDS.get(key)
            if target is None:
                unknown.append(key)
                continue
            section, field = target
            sections[section][field] = value
        if unknown:
            raise ValueError(f"Unknown activity field(s): {sorted(unknown)}")

        return cls(
            transportation=TransportationInput(**sections["transportation"]),
            energy=EnergyInput(**sections["energy"]),
            lifestyle=LifestyleInput(**sections["lifestyle"]),
        )

    def to_flat(self) -> dict[str, Any]:
        """Return the camelCase flat representation of this record."""
        out: dict[str, Any] = {}
        for key, (section, field) in _CAMEL_FIELDS.items():
            out[key] = getattr(getattr(self, section), field)
        return out
