"""
Shared pytest fixtures for the footprint estimator test suite.

Provides:
  - ``reference_activity``: the canonical regression household.
  - ``clean_env``: strips ``FOOTPRINT_*`` variables so config tests see
    only what they set.
  - ``_isolate_root_logging`` (autouse): removes root handlers installed by
    ``configure_logging`` during a test and restores the root level.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from footprint_estimator.models.activity import ActivityInput
from footprint_estimator.models.breakdown import EmissionsBreakdown

# Canonical household; expected breakdown 6.50 / 9.72 / 3.36 / 19.58.
REFERENCE_FLAT: dict[str, Any] = {
    "carMiles": 12000,
    "carEfficiency": 25,
    "publicTransportMiles": 2000,
    "flightsPerYear": 2,
    "electricityKwhPerMonth": 900,
    "gasThermsPerMonth": 50,
    "heatingCostPerYear": 1200,
    "diet": "mixed",
    "shoppingThousandsPerYear": 5,
    "wasteBagsPerWeek": 3,
}


@pytest.fixture
def reference_activity() -> ActivityInput:
    """The canonical regression household."""
    return ActivityInput.from_flat(REFERENCE_FLAT)


@pytest.fixture
def zero_breakdown() -> EmissionsBreakdown:
    """A degenerate all-zero breakdown."""
    return EmissionsBreakdown(transportation=0.0, energy=0.0, lifestyle=0.0, total=0.0)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove FOOTPRINT_* overrides for the duration of a test."""
    for var in ("FOOTPRINT_LOG_LEVEL", "FOOTPRINT_QUICK_WIN_LIMIT", "FOOTPRINT_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def _isolate_root_logging():
    """Drop root handlers a test installed; pytest's own capture handlers are kept.

    CLI invocations call ``configure_logging``, which binds a StreamHandler to
    the runner's temporary stderr. Left in place, later tests log to a closed
    stream.
    """
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before and type(handler).__module__ == "logging":
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
