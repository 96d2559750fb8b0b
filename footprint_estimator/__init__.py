"""
footprint_estimator — household carbon footprint estimation and
reduction recommendations.

Typical use::

    from footprint_estimator.estimation.emissions import estimate
    from footprint_estimator.recommendations.engine import recommend

    breakdown = estimate(activity)
    recommendations = recommend(activity, breakdown)
"""

__version__ = "0.1.0"
