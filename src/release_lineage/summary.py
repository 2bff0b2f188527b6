"""Human-readable summary rendering for $GITHUB_STEP_SUMMARY."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals, a per-package table and all errors."""
    totals = report.get("totals", {})
    families = report.get("families", [])
    errors = report.get("errors", [])

    lines = []
    lines.append("# Release Lineage Summary")
    lines.append("")
    lines.append(
        f"Packages: {totals.get('families', 0)} | Releases: {totals.get('releases', 0)}"
        f" | Errors: {totals.get('errors', 0)}"
    )
    lines.append("")
    lines.append("| Package | Releases | Status |")
    lines.append("| --- | --- | --- |")

    for family in families:
        name = family.get("name") or "(unknown package)"
        family_errors = family.get("errors") or []
        status = f"{len(family_errors)} error(s)" if family_errors else "OK"
        lines.append(f"| {name} | {family.get('releases', 0)} | {status} |")

    if not families:
        lines.append("| (no managed packages) | 0 | n/a |")

    if errors:
        lines.append("")
        lines.append("## Errors")
        lines.append("")
        for message in errors:
            lines.append(f"- {message}")

    return "\n".join(lines) + "\n"
