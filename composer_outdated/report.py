"""Human- and machine-readable rendering of an outdated report."""

from __future__ import annotations

import json

from .models import OutdatedReport, OverallOutcome


def format_report(outcome: OverallOutcome, report: OutdatedReport) -> str:
    """Render the report as plain text, one package per line.

    Example:
        acme/gadget 1.0.0 -> 2.0.0 (update-possible)
          warning: Package is abandoned, you should avoid using it.
        Overall: update-required
    """
    lines: list[str] = []
    if not report.locked:
        lines.append("No packages reported.")
    for pkg in report.locked:
        lines.append(
            f"{pkg.name} {pkg.version} -> {pkg.latest} ({pkg.update_classification})"
        )
        if pkg.warning is not None:
            lines.append(f"  warning: {pkg.warning}")
    lines.append(f"Overall: {outcome}")
    return "\n".join(lines)


def format_json(outcome: OverallOutcome, report: OutdatedReport) -> str:
    """Render the outcome and report as JSON, using composer's field names."""
    data = report.model_dump(mode="json", by_alias=True)
    return json.dumps({"outcome": outcome.value, **data}, indent=2)
