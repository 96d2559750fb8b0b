"""
Household footprint estimator: CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load and validate the activity file.
  4. Estimate (and, for ``recommend``, derive recommendations).
  5. Report result to stdout.

Install and run::

    pip install -e .
    footprint-estimator --help
    footprint-estimator estimate samples/household.toml
    footprint-estimator estimate samples/household.toml --json
    footprint-estimator recommend samples/household.toml --steps
    footprint-estimator recommend samples/household.toml --output data/report.json
    footprint-estimator validate-config
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="footprint-estimator",
    help="Household carbon footprint estimator and reduction recommendations.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from footprint_estimator.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from footprint_estimator.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_activity_or_exit(activity_file: Path):
    """Load the activity file, printing validation problems and exiting on failure."""
    from footprint_estimator.ingestion.activity_file import (
        ActivityInputError,
        load_activity_file,
    )

    try:
        return load_activity_file(activity_file)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except ActivityInputError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("estimate")
def estimate_cmd(
    activity_file: Path = typer.Argument(
        ...,
        help="Activity record (.json or .toml).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the breakdown and assessment as JSON instead of a table.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Estimate the annual emissions breakdown for an activity record."""
    from footprint_estimator.estimation.benchmark import assess
    from footprint_estimator.estimation.emissions import estimate
    from footprint_estimator.reporting.export import build_report
    from footprint_estimator.reporting.formatters import format_assessment, format_breakdown

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    activity = _load_activity_or_exit(activity_file)
    breakdown = estimate(activity)
    assessment = assess(
        breakdown,
        average_tons=config.benchmark.average_footprint_tons,
        global_target_tons=config.benchmark.global_target_tons,
    )

    if as_json:
        report = build_report(activity, breakdown, assessment=assessment)
        typer.echo(json.dumps(report, indent=2, default=str))
        return

    typer.echo(f"Annual footprint for {activity_file.name}")
    typer.echo("")
    typer.echo(format_breakdown(breakdown))
    typer.echo("")
    typer.echo(format_assessment(assessment))


@app.command("recommend")
def recommend_cmd(
    activity_file: Path = typer.Argument(
        ...,
        help="Activity record (.json or .toml).",
    ),
    quick_wins: Optional[int] = typer.Option(
        None,
        "--quick-wins",
        min=1,
        help="Number of quick wins to list (default: config [recommendations]).",
    ),
    show_steps: bool = typer.Option(
        False,
        "--steps",
        help="Print the action steps under each recommendation.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the full report as JSON to this path.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Rank reduction recommendations for an activity record."""
    from footprint_estimator.estimation.benchmark import assess
    from footprint_estimator.estimation.emissions import estimate
    from footprint_estimator.recommendations.engine import recommend
    from footprint_estimator.recommendations.summary import summarize
    from footprint_estimator.reporting.export import build_report, write_report_json
    from footprint_estimator.reporting.formatters import (
        format_breakdown,
        format_recommendations_table,
        format_reduction_summary,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    activity = _load_activity_or_exit(activity_file)
    breakdown = estimate(activity)
    recommendations = recommend(activity, breakdown)
    limit = quick_wins or config.recommendations.quick_win_limit
    summary = summarize(recommendations, breakdown, quick_win_limit=limit)

    typer.echo(f"Reduction strategies for {activity_file.name}")
    typer.echo("")
    typer.echo(format_breakdown(breakdown))
    typer.echo("")
    typer.echo(format_recommendations_table(recommendations, breakdown, show_steps=show_steps))
    typer.echo("")
    typer.echo(format_reduction_summary(summary))

    if output is not None:
        assessment = assess(
            breakdown,
            average_tons=config.benchmark.average_footprint_tons,
            global_target_tons=config.benchmark.global_target_tons,
        )
        report = build_report(
            activity,
            breakdown,
            assessment=assessment,
            recommendations=recommendations,
            summary=summary,
        )
        path = write_report_json(report, output)
        typer.echo("")
        typer.echo(f"[OK] Report written to {path}")


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Log level:         {config.logging.level}")
    typer.echo(f"  Quick win limit:   {config.recommendations.quick_win_limit}")
    typer.echo(f"  Average footprint: {config.benchmark.average_footprint_tons} t")
    typer.echo(f"  Global target:     {config.benchmark.global_target_tons} t")
    typer.echo(f"  Debug mode:        {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
