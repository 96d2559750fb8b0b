"""
Reduction recommendation model.

A ``Recommendation`` is derived fresh on every ``recommend()`` call and is
never persisted. It carries only semantic tags (category, impact,
difficulty, cost); mapping those tags to icons or colours is left to
whatever renders it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from footprint_estimator.taxonomy.activity_taxonomy import (
    Cost,
    Difficulty,
    EmissionCategory,
    Impact,
)


class Recommendation(BaseModel):
    """One candidate reduction action with its estimated annual savings.

    Attributes:
        id: Stable machine key, e.g. ``"reduce-driving"``.
        title: Short human-readable headline.
        description: One-sentence explanation.
        category: Emission category the action targets.
        impact: Relative effect size tag.
        savings: Estimated reduction in tons CO₂e per year.
        difficulty: Effort tag; ``easy`` marks a quick win.
        cost: Up-front cost tag.
        action_steps: Ordered concrete steps to carry the action out.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    category: EmissionCategory
    impact: Impact
    savings: float
    difficulty: Difficulty
    cost: Cost
    action_steps: tuple[str, ...] = ()

    @field_validator("id", "title")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("id and title must not be empty.")
        return v.strip()

    @property
    def is_quick_win(self) -> bool:
        return self.difficulty == Difficulty.EASY
