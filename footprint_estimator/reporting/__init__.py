"""
footprint_estimator.reporting — Rendering and export of estimator output.

Nothing here computes emissions or savings; every value shown is taken
as-is from the breakdown, assessment, and recommendation objects.

Modules:
  formatters — ASCII terminal formatters for Typer CLI commands.
  export     — JSON report building and writing.
"""
