"""
Recommendation engine: derives ranked reduction actions from an
ActivityInput and the EmissionsBreakdown estimated for it.

Modules
-------
catalog : RecommendationTemplate dataclass + the static CATALOG of
          templates (text, tags, action steps) in generation order.
engine  : recommend() — guard evaluation, savings, stable ranking.
summary : total_potential_savings() + reduction_percentage() +
          quick_wins() + summarize() — derived aggregates.
"""
