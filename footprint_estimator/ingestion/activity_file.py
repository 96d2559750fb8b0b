"""
Activity file loader and boundary validation.

The estimator accepts any float; this module is where submitted figures are
checked before they reach it. Two file formats are read:

  ``.json``, either sectioned or flat::

      {"transportation": {"car_miles": 12000, "car_efficiency": 25}, ...}
      {"carMiles": 12000, "carEfficiency": 25, "diet": "mixed", ...}

  ``.toml``, sectioned tables::

      [transportation]
      car_miles = 12000
      car_efficiency = 25

      [lifestyle]
      diet = "mixed"

Omitted fields take the model defaults (0, ``car_efficiency = 25``,
``diet = "mixed"``).

Validation rules (``validate_activity``)
----------------------------------------
  - every numeric field must be finite and >= 0
  - ``car_efficiency`` must be > 0
  - an unrecognised ``diet`` is logged as a warning only; the estimator
    treats it as ``mixed``
"""

from __future__ import annotations

import json
import logging
import math
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from footprint_estimator.models.activity import ActivityInput
from footprint_estimator.taxonomy.activity_taxonomy import Diet

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = frozenset({".json", ".toml"})
_SECTION_KEYS = frozenset({"transportation", "energy", "lifestyle"})


class ActivityInputError(ValueError):
    """Raised when submitted activity figures fail boundary validation.

    Attributes:
        problems: One message per failed rule.
    """

    def __init__(self, problems: list[str], source: str = "") -> None:
        self.problems = list(problems)
        where = f" in {source}" if source else ""
        detail = "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(f"{len(self.problems)} invalid activity value(s){where}:\n{detail}")


def validate_activity(activity: ActivityInput) -> list[str]:
    """Check an activity record against the boundary rules.

    Args:
        activity: Record to check.

    Returns:
        List of problem descriptions; empty when the record is valid.
    """
    problems: list[str] = []
    for section_name in ("transportation", "energy", "lifestyle"):
        section = getattr(activity, section_name)
        for field, value in section.model_dump().items():
            if not isinstance(value, float):
                continue
            label = f"{section_name}.{field}"
            if not math.isfinite(value):
                problems.append(f"{label} must be a finite number, got {value}.")
            elif value < 0:
                problems.append(f"{label} must be non-negative, got {value}.")

    efficiency = activity.transportation.car_efficiency
    if math.isfinite(efficiency) and efficiency == 0:
        problems.append("transportation.car_efficiency must be greater than 0.")

    diet = activity.lifestyle.diet
    if diet not in {d.value for d in Diet}:
        logger.warning(
            "Unrecognised diet '%s'; the mixed-diet factor will be used.", diet
        )
    return problems


def parse_activity(data: dict[str, Any], source: str = "") -> ActivityInput:
    """Build and validate an ``ActivityInput`` from a decoded mapping.

    Sectioned mappings (any of ``transportation``/``energy``/``lifestyle``
    as a top-level key) are validated directly; anything else is treated
    as the flat layout.

    Raises:
        ActivityInputError: If the mapping cannot be parsed or fails validation.
    """
    try:
        if _SECTION_KEYS & set(data):
            unknown = set(data) - _SECTION_KEYS
            if unknown:
                raise ValueError(f"Unknown top-level key(s): {sorted(unknown)}")
            activity = ActivityInput.model_validate(data)
        else:
            activity = ActivityInput.from_flat(data)
    except ValidationError as exc:
        problems = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        ]
        raise ActivityInputError(problems, source) from exc
    except ValueError as exc:
        raise ActivityInputError([str(exc)], source) from exc

    problems = validate_activity(activity)
    if problems:
        raise ActivityInputError(problems, source)
    return activity


def load_activity_file(path: Path) -> ActivityInput:
    """Read, parse, and validate an activity file.

    Args:
        path: ``.json`` or ``.toml`` file.

    Returns:
        Validated ``ActivityInput``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ActivityInputError: If the file is malformed or any value is invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Activity file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ActivityInputError(
            [f"Unsupported file type '{suffix}'; expected one of {sorted(SUPPORTED_SUFFIXES)}."],
            path.name,
        )

    try:
        if suffix == ".json":
            data = json.loads(path.read_text(encoding="utf-8"))
        else:
            with open(path, "rb") as f:
                data = tomllib.load(f)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ActivityInputError([f"Could not decode file: {exc}"], path.name) from exc

    if not isinstance(data, dict):
        raise ActivityInputError(["Top-level value must be an object/table."], path.name)

    activity = parse_activity(data, path.name)
    logger.info("Loaded activity record from %s", path.name)
    return activity
