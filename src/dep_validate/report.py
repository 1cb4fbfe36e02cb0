"""Report rendering for validation results.

Tables are drawn with rich into plain text (no colour codes) so the output can
be written to any stream or log file.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .errors import CallbackFailure
from .models import ManifestRun, ValidationResult, Violation

RUNTIME_TITLE = "Dependencies"
DEVELOPMENT_TITLE = "Dev Dependencies"
TABLE_WIDTH = 120


def _table_width(violations: Sequence[Violation]) -> int:
    """Width that fits every cell unwrapped, never below TABLE_WIDTH."""
    headers = ("", "Actual", "Expected")
    widths = [cell_len(header) for header in headers]
    for violation in violations:
        cells = (violation.name, violation.version, violation.expected)
        widths = [max(width, cell_len(cell)) for width, cell in zip(widths, cells)]
    # One space of padding on each side of a cell plus one border per column and the edge.
    return max(TABLE_WIDTH, sum(widths) + 3 * len(widths) + 1)


def _format_errors(title: str, violations: Sequence[Violation]) -> str:
    table = Table(title=Text(title), box=box.SQUARE)
    table.add_column("", overflow="fold")
    table.add_column("Actual", justify="right", overflow="fold")
    table.add_column("Expected", justify="right", overflow="fold")

    # Text() keeps names such as "[foo]" from being read as console markup.
    for violation in violations:
        table.add_row(Text(violation.name), Text(violation.version), Text(violation.expected))

    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=_table_width(violations),
        color_system=None,
        highlight=False,
        emoji=False,
    )
    console.print(table)
    return buffer.getvalue().rstrip("\n")


def format_results(result: ValidationResult) -> dict[str, str]:
    """Render each group's violations as a table; compliant groups render ``""``."""
    return {
        "dependencies": (
            _format_errors(RUNTIME_TITLE, result.dependencies) if result.dependencies else ""
        ),
        "devDependencies": (
            _format_errors(DEVELOPMENT_TITLE, result.dev_dependencies)
            if result.dev_dependencies
            else ""
        ),
    }


def render(result: ValidationResult) -> str:
    """Join the non-empty group tables, runtime first, each followed by a newline."""
    formatted = format_results(result)
    output = ""
    for key in ("dependencies", "devDependencies"):
        if formatted[key]:
            output += formatted[key] + "\n"
    return output


def log(result: ValidationResult | CallbackFailure, stream: TextIO | None = None) -> None:
    """Write the rendered report to ``stream`` (default: stdout)."""
    stream = stream or sys.stdout

    if isinstance(result, CallbackFailure):
        result = result.results

    stream.write(render(result))


def aggregate(runs: Sequence[ManifestRun]) -> dict[str, Any]:
    """Aggregate per-manifest results into a single JSON-friendly report.

    Manifests keep their input order. Totals count manifests, failing
    manifests and violations across both groups.
    """
    manifests = []
    for run in runs:
        entry: dict[str, Any] = {"path": run.path}
        entry.update(run.result.to_dict())
        manifests.append(entry)

    total_violations = sum(run.result.total for run in runs)

    return {
        "version": "1",
        "hasViolations": total_violations > 0,
        "manifests": manifests,
        "totals": {
            "manifests": len(runs),
            "failed": sum(1 for run in runs if run.failed),
            "violations": total_violations,
        },
    }
