"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from typing import Any

from .models import ValidationResult


def aggregate(result: ValidationResult) -> dict[str, Any]:
    """Aggregate per-family results into a single JSON-friendly report.

    Totals and the top-level ``hasErrors`` flag are computed here; every error
    message is passed through unchanged.
    """

    families = [family.to_dict() for family in result.families]
    errors = result.errors

    report: dict[str, Any] = {
        "version": "1",
        "hasErrors": bool(errors),
        "families": families,
        "errors": errors,
        "totals": {
            "families": len(families),
            "releases": sum(family.release_count for family in result.families),
            "errors": len(errors),
        },
    }

    return report
