"""
Emission factors: fixed per-unit multipliers, in metric tons CO₂e.

Every factor converts one activity unit into tons of CO₂-equivalent per
year. The values are published-style averages, not a calibrated model;
changing any of them changes every reference output, so they are constants
rather than configuration.

    Activity            Unit                  Factor
    ------------------  --------------------  ---------------------------
    Car fuel            gallon of gasoline    19.6 lb  (÷ 2000 lb/ton)
    Public transport    passenger mile        0.0004 t (0.4 kg)
    Flight              flight                0.5 t
    Electricity         kWh                   0.0004 t (0.4 kg)
    Natural gas         therm                 0.005 t  (5 kg)
    Heating             currency unit spent   0.002 t  (2 kg)
    Shopping            thousand spent        0.01 t
    Waste               bag per week          0.002 t  (2 kg)
    Diet                profile (annual)      see DIET_FACTORS
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from footprint_estimator.taxonomy.activity_taxonomy import Diet

LB_CO2_PER_GALLON_GASOLINE = 19.6
LB_PER_TON = 2000
TONS_PER_PUBLIC_TRANSPORT_MILE = 0.0004
TONS_PER_FLIGHT = 0.5

MONTHS_PER_YEAR = 12
TONS_PER_KWH = 0.0004
TONS_PER_THERM = 0.005
TONS_PER_HEATING_CURRENCY_UNIT = 0.002

TONS_PER_SHOPPING_THOUSAND = 0.01
TONS_PER_WASTE_BAG = 0.002

# Annual diet emissions by profile; read-only for the life of the process.
DIET_FACTORS: Mapping[str, float] = MappingProxyType({
    Diet.VEGAN.value:      1.5,
    Diet.VEGETARIAN.value: 2.5,
    Diet.MIXED.value:      3.3,
    Diet.MEAT_HEAVY.value: 4.5,
})
DEFAULT_DIET_FACTOR = DIET_FACTORS[Diet.MIXED.value]
