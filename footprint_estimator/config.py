"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``FOOTPRINT_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The estimator and recommendation engine take no configuration: their
factors and guard thresholds are fixed. Configuration only covers how
results are presented (quick-win count, benchmark references) and logging.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class RecommendationsConfig(BaseModel):
    """Presentation of the ranked recommendation list."""

    model_config = ConfigDict(frozen=True)

    quick_win_limit: int = 4

    @field_validator("quick_win_limit")
    @classmethod
    def validate_quick_win_limit(cls, v: int) -> int:
        if not 1 <= v <= 10:
            raise ValueError(f"quick_win_limit must be in [1, 10], got {v}.")
        return v


class BenchmarkConfig(BaseModel):
    """Reference figures a footprint is compared against (tons CO₂e/yr)."""

    model_config = ConfigDict(frozen=True)

    average_footprint_tons: float = 16.0
    global_target_tons: float = 2.3

    @field_validator("average_footprint_tons", "global_target_tons")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Benchmark figures must be positive, got {v}.")
        return v


class AppConfig(BaseModel):
    """Complete application configuration, the single source of truth.

    CLI commands receive an ``AppConfig`` instance constructed by
    ``load_config()``, which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()
    recommendations: RecommendationsConfig = RecommendationsConfig()
    benchmark: BenchmarkConfig = BenchmarkConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``; when that default file is
            absent (e.g. an installed wheel) built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicitly given ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    raw: dict[str, Any] = {}
    if config_path is None:
        default_path = root / "config" / "default.toml"
        if default_path.exists():
            raw = _read_toml_with_local(default_path)
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        raw = _read_toml_with_local(config_path)

    # 3. Apply FOOTPRINT_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _read_toml_with_local(config_path: Path) -> dict[str, Any]:
    """Read ``config_path`` and deep-merge a sibling ``local.toml`` if present."""
    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists() and local_config_path != config_path:
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)
    return raw


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply FOOTPRINT_* env vars to the raw config dict.

    Supported overrides:
      FOOTPRINT_LOG_LEVEL        → raw["logging"]["level"]
      FOOTPRINT_QUICK_WIN_LIMIT  → raw["recommendations"]["quick_win_limit"]
      FOOTPRINT_DEBUG            → raw["debug"]
    """
    if log_level := os.environ.get("FOOTPRINT_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if limit := os.environ.get("FOOTPRINT_QUICK_WIN_LIMIT"):
        raw.setdefault("recommendations", {})["quick_win_limit"] = limit

    if debug := os.environ.get("FOOTPRINT_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        logging=LoggingConfig(**raw.get("logging", {})),
        recommendations=RecommendationsConfig(**raw.get("recommendations", {})),
        benchmark=BenchmarkConfig(**raw.get("benchmark", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
