"""Markdown summary rendering for CI step summaries ($GITHUB_STEP_SUMMARY)."""

from __future__ import annotations

from typing import Any

_GROUPS = ("dependencies", "devDependencies")


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of violations.

    ``report`` is the output of ``report.aggregate``.
    """
    totals = report.get("totals", {})
    manifests = report.get("manifests", [])

    lines = []
    lines.append("# dep-validate Summary")
    lines.append("")
    lines.append(
        f"Manifests: {totals.get('manifests', 0)} | Failed: {totals.get('failed', 0)}"
        f" | Violations: {totals.get('violations', 0)}"
    )
    lines.append("")
    lines.append("| Manifest | Group | Dependency | Actual | Expected |")
    lines.append("| --- | --- | --- | --- | --- |")

    has_rows = False

    for manifest in manifests:
        path = manifest.get("path") or "(unknown manifest)"
        violations = [
            (group, violation) for group in _GROUPS for violation in manifest.get(group) or []
        ]
        if not violations:
            lines.append(f"| {path} | n/a | No violations | n/a | n/a |")
            has_rows = True
            continue

        for group, violation in violations:
            lines.append(
                f"| {path} | {group} | {violation.get('name', '')} "
                f"| `{violation.get('version', '')}` | `{violation.get('expected', '')}` |"
            )
            has_rows = True

    if not has_rows:
        lines.append("| (no manifests validated) | n/a | No violations | n/a | n/a |")

    return "\n".join(lines) + "\n"
