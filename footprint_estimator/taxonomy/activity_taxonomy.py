"""
Taxonomy for household footprint activities and reduction actions.

Two families of enums live here:
  - Activity side: ``Diet`` and ``EmissionCategory`` describe *what* was
    reported and *where* its emissions are accounted.
  - Action side: ``Impact``, ``Difficulty`` and ``Cost`` tag each
    reduction recommendation; ``SeverityLevel`` grades a whole footprint.

Presentation layers map these tags to icons and colours themselves; nothing
in this package carries rendering metadata.

This module has NO imports from any other ``footprint_estimator`` package.
"""

from enum import StrEnum


class Diet(StrEnum):
    """Self-reported diet profile. Unrecognised strings are treated as MIXED."""

    VEGAN = "vegan"
    VEGETARIAN = "vegetarian"
    MIXED = "mixed"
    MEAT_HEAVY = "meat_heavy"


class EmissionCategory(StrEnum):
    """Accounting bucket for an emission source or a reduction action."""

    TRANSPORTATION = "transportation"
    """Private car, public transport, and air travel."""

    ENERGY = "energy"
    """Household electricity, natural gas, and heating spend."""

    LIFESTYLE = "lifestyle"
    """Diet, shopping, and household waste."""


class Impact(StrEnum):
    """Relative size of a recommendation's effect."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Difficulty(StrEnum):
    """Effort needed to adopt a recommendation. EASY actions are quick wins."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Cost(StrEnum):
    """Up-front money needed to adopt a recommendation."""

    FREE = "free"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SeverityLevel(StrEnum):
    """Grade of an annual footprint relative to typical households."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"
